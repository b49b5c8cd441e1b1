import functools
import os

import click

from blog_app.client import BlogClient
from blog_app.client.listing import SORT_ORDERS, paginate, search_blogs, sort_blogs
from blog_app.client.storage import LocalStorage
from blog_app.exceptions import BlogAppError, NotFound


DEFAULT_STORAGE = os.path.join(os.path.expanduser('~'), '.blog_app', 'storage.json')


# ----------------
# Helper Functions
# ----------------

def report_errors(func):
    @functools.wraps(func)
    def wrapper_report_errors(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BlogAppError as e:
            raise click.ClickException(str(e)) from e
    return wrapper_report_errors


def login_required(func):
    @functools.wraps(func)
    def wrapper_login_required(client, *args, **kwargs):
        if not client.guard.is_authenticated:
            raise click.ClickException('Please log in first (blog-client login EMAIL).')
        return func(client, *args, **kwargs)
    return wrapper_login_required


def echo_blog(record, client, full=False):
    badge = 'FEATURED' if record.featured else 'BLOG'
    owner = ' (yours)' if client.guard.is_owner(record) else ''
    click.echo(f'[{record.id}] {record.title} by {record.author}, {record.date} [{badge}]{owner}')
    if full:
        click.echo(f'Owner: {record.owner_email}')
        click.echo('')
        click.echo(record.content or '')


# ------------
# CLI Commands
# ------------

@click.group()
@click.option('--base-url', envvar='BLOG_API_URL', default='http://localhost:5000', show_default=True,
              help='Address of the Flask Blog API.')
@click.option('--storage', envvar='BLOG_CLIENT_STORAGE', default=DEFAULT_STORAGE, show_default=True,
              help='File that keeps the session between runs.')
@click.pass_context
def cli(ctx, base_url, storage):
    """Read and publish blog posts through the Flask Blog API."""
    # A requests session may be handed in as the context object
    ctx.obj = BlogClient(base_url, storage=LocalStorage(storage), http=ctx.obj)


@cli.command()
@click.argument('email')
@click.password_option(confirmation_prompt=False)
@click.pass_obj
@report_errors
def login(client, email, password):
    """Log in and keep the session for later commands."""
    user = client.accounts.login(email, password)
    click.echo(f'Logged in as {user.name} ({user.email})')


@cli.command()
@click.argument('name')
@click.argument('email')
@click.password_option()
@click.pass_obj
@report_errors
def signup(client, name, email, password):
    """Create an account and log in with it."""
    user = client.accounts.signup(name, email, password)
    click.echo(f'Account created! Logged in as {user.name} ({user.email})')


@cli.command()
@click.pass_obj
@report_errors
def logout(client):
    """Forget the current session."""
    client.accounts.logout()
    click.echo('Goodbye!')


@cli.command()
@click.pass_obj
def whoami(client):
    """Show the logged in user."""
    user = client.guard.current_user
    if not client.guard.is_authenticated or user is None:
        click.echo('Not logged in')
    else:
        click.echo(f'{user.name} ({user.email}), user {user.id}')


@cli.command(name='list')
@click.option('--search', default='', help='Only show posts whose title, content or author contain this text.')
@click.option('--sort', 'order', type=click.Choice(SORT_ORDERS), default='newest', show_default=True)
@click.option('--page', type=click.IntRange(min=1), default=1, show_default=True)
@click.pass_obj
@report_errors
def list_blogs(client, search, order, page):
    """List the blog posts."""
    if not client.blogs.fetch_blogs():
        click.echo(f'Could not refresh the blog posts: {client.cache.error}', err=True)

    blogs = sort_blogs(search_blogs(client.cache.blogs, search), order)
    current = paginate(blogs, page)
    for record in current.items:
        echo_blog(record, client)
    click.echo(f'Showing {len(current.items)} of {current.total} blogs (page {current.page} of {max(current.total_pages, 1)})')


@cli.command()
@click.argument('blog_id')
@click.pass_obj
@report_errors
def show(client, blog_id):
    """Show a single blog post."""
    try:
        record = client.blogs.load_blog(blog_id)
    except NotFound:
        raise click.ClickException(f'Blog post {blog_id} not found') from None
    echo_blog(record, client, full=True)


@cli.command()
@click.option('--title', prompt=True)
@click.option('--content', prompt=True)
@click.option('--author', prompt=True)
@click.option('--featured/--not-featured', default=False)
@click.pass_obj
@report_errors
@login_required
def create(client, title, content, author, featured):
    """Publish a new blog post."""
    record = client.blogs.create_blog(dict(title=title, content=content, author=author, featured=featured))
    click.echo(f'Created blog post {record.id}')


@cli.command()
@click.argument('blog_id')
@click.option('--title')
@click.option('--content')
@click.option('--author')
@click.option('--featured/--not-featured', default=None)
@click.pass_obj
@report_errors
@login_required
def edit(client, blog_id, title, content, author, featured):
    """Edit one of your blog posts; unspecified fields keep their value."""
    client.blogs.fetch_blogs()
    current = client.blogs.load_blog(blog_id)
    form = dict(title=current.title, content=current.content, author=current.author, featured=current.featured)
    changes = dict(title=title, content=content, author=author, featured=featured)
    form.update({key: value for key, value in changes.items() if value is not None})

    record = client.blogs.update_blog(blog_id, form)
    click.echo(f'Updated blog post {record.id}')


@cli.command()
@click.argument('blog_id')
@click.confirmation_option(prompt='Are you sure you want to delete this blog post?')
@click.pass_obj
@report_errors
@login_required
def delete(client, blog_id):
    """Delete one of your blog posts."""
    client.blogs.fetch_blogs()
    client.blogs.delete_blog(blog_id)
    click.echo(f'Deleted blog post {blog_id}')

import os


def _env_flag(name, default='False'):
    return os.getenv(name, default=default).lower() in ('1', 'true', 'yes')


class Config(object):
    DEBUG = False
    TESTING = False
    LOG_TO_STDOUT = _env_flag('LOG_TO_STDOUT')

    # Require a bearer token (and record ownership) to modify blog records
    OWNERSHIP_ENFORCED = _env_flag('OWNERSHIP_ENFORCED', default='True')

    # Accounts loaded into the user directory whenever the application starts
    SEED_USERS = [
        {'id': 1, 'name': 'Admin User', 'email': 'admin@example.com', 'password': 'password123'},
    ]

    APIFAIRY_TITLE = 'Flask Blog API'
    APIFAIRY_VERSION = '0.1'


class ProductionConfig(Config):
    SEED_USERS = []


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    LOG_TO_STDOUT = True

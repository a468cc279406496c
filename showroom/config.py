import os
from dotenv import load_dotenv

load_dotenv()

DEV_SECRET = 'dev-secret-key-change-in-production'


def _flag(name, default):
    return os.environ.get(name, str(default)).lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or DEV_SECRET

    # Access tokens
    JWT_SECRET_KEY = os.environ.get('JWT_SECRET_KEY') or SECRET_KEY
    JWT_ALGORITHM = 'HS256'
    TOKEN_TTL = int(os.environ.get('TOKEN_TTL', 24 * 60 * 60))  # 24 hours

    # Password hashing
    BCRYPT_LOG_ROUNDS = int(os.environ.get('BCRYPT_LOG_ROUNDS', 12))
    BCRYPT_HANDLE_LONG_PASSWORDS = True

    # Database - Using SQLite for easy local development
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///showroom.db'  # relative paths land in the instance folder
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Mail Configuration
    MAIL_SERVER = os.environ.get('MAIL_SERVER', 'smtp.gmail.com')
    MAIL_PORT = int(os.environ.get('MAIL_PORT', 587))
    MAIL_USE_TLS = _flag('MAIL_USE_TLS', True)
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD')
    MAIL_DEFAULT_SENDER = os.environ.get('MAIL_DEFAULT_SENDER') or os.environ.get('MAIL_USERNAME')

    # Contact notifications
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL')
    NOTIFY_BACKEND = os.environ.get('NOTIFY_BACKEND', 'mail')  # mail, sns
    NOTIFY_IN_BACKGROUND = _flag('NOTIFY_IN_BACKGROUND', True)
    SNS_TOPIC_ARN = os.environ.get('SNS_TOPIC_ARN')
    AWS_REGION = os.environ.get('AWS_REGION', 'us-east-1')

    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    # Pagination
    ITEMS_PER_PAGE = 12
    CONTACTS_PER_PAGE = 10
    MAX_PAGE_SIZE = 100

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    SQLALCHEMY_ECHO = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False

    @staticmethod
    def check(app):
        if app.config['SECRET_KEY'] == DEV_SECRET or app.config['JWT_SECRET_KEY'] == DEV_SECRET:
            raise RuntimeError('SECRET_KEY / JWT_SECRET_KEY must be set in production')


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    JWT_SECRET_KEY = 'testing-secret'
    BCRYPT_LOG_ROUNDS = 4
    MAIL_SUPPRESS_SEND = True
    MAIL_DEFAULT_SENDER = 'noreply@showroom.com.tr'
    ADMIN_EMAIL = 'info@showroom.com.tr'
    NOTIFY_BACKEND = 'mail'
    NOTIFY_IN_BACKGROUND = False


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

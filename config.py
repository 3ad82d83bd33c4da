import logging
import os
from dotenv import load_dotenv


load_dotenv()


POSTGRES_USER = os.environ.get('POSTGRES_USER', 'postgres')
POSTGRES_PASSWORD = os.environ.get('POSTGRES_PASSWORD', 'postgres')
POSTGRES_IP = os.environ.get('POSTGRES_IP', 'localhost')
POSTGRES_PORT = int(os.environ.get('POSTGRES_PORT', 5432))
POSTGRES_DB = os.environ.get('POSTGRES_DB', 'pr_reviewers')

DATABASE_URL = os.environ.get(
    'DATABASE_URL',
    f'postgresql+asyncpg://{POSTGRES_USER}:{POSTGRES_PASSWORD}@{POSTGRES_IP}:{POSTGRES_PORT}/{POSTGRES_DB}'
)

DB_POOL_SIZE = int(os.environ.get('DB_POOL_SIZE', 10))
DB_MAX_OVERFLOW = int(os.environ.get('DB_MAX_OVERFLOW', 5))
DB_POOL_TIMEOUT = float(os.environ.get('DB_POOL_TIMEOUT', 10))
DB_COMMAND_TIMEOUT = float(os.environ.get('DB_COMMAND_TIMEOUT', 5))
DB_ISOLATION_LEVEL = os.environ.get('DB_ISOLATION_LEVEL', 'READ COMMITTED')
DB_ECHO = os.environ.get('DB_ECHO', 'false').lower() in ('1', 'true', 'yes')

API_HOST = os.environ.get('API_HOST', '0.0.0.0')
API_PORT = int(os.environ.get('API_PORT', 8080))

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = os.environ.get(
    'LOG_FORMAT',
    '%(asctime)s %(levelname)s [%(name)s] %(message)s'
)


def configure_logging():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

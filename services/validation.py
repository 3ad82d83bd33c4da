from database.models import EXTERNAL_ID_LENGTH, TITLE_LENGTH
from services.errors import InvalidInput


def require_external_id(value: str, field_name: str) -> str:
    if value is None or not value.strip():
        raise InvalidInput(f'{field_name} must not be empty')
    if len(value) > EXTERNAL_ID_LENGTH:
        raise InvalidInput(f'{field_name} must be at most {EXTERNAL_ID_LENGTH} characters')

    return value


def require_title(value: str) -> str:
    if value is None or not value.strip():
        raise InvalidInput('pull_request_name must not be empty')
    if len(value) > TITLE_LENGTH:
        raise InvalidInput(f'pull_request_name must be at most {TITLE_LENGTH} characters')

    return value

from wishlist_api.models import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH, MAX_QUANTITY


def validate_json(data, required_fields):
    """
    Validate a parsed JSON request body for required fields.
    Returns an error message when the body is not a JSON object or misses
    one of the required fields, otherwise None.
    """
    if not isinstance(data, dict):
        return 'Request body must be a JSON object'

    missing_fields = [field for field in required_fields if field not in data]
    if missing_fields:
        return f'Missing required fields: {", ".join(missing_fields)}'

    return None


def validate_quantity(value):
    """Return an error message unless value is an integer the num column can hold."""
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        return "'num' must be an integer"
    if value < 0:
        return "'num' must not be negative"
    if value > MAX_QUANTITY:
        return f"'num' must not exceed {MAX_QUANTITY}"
    return None


def validate_name(value):
    if not isinstance(value, str) or not value.strip():
        return "'name' must be a non-empty string"
    if len(value) > MAX_NAME_LENGTH:
        return f"'name' must be at most {MAX_NAME_LENGTH} characters"
    # Names are addressed as a single path segment on update/delete
    if '/' in value:
        return "'name' must not contain '/'"
    return None


def validate_email(value):
    if len(value) > MAX_EMAIL_LENGTH:
        return f"Email must be at most {MAX_EMAIL_LENGTH} characters"
    return None

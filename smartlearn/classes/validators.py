# validators.py

def is_blank(value):
    """True for values a request must not leave out: None and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_fields(data, fields):
    return [field for field in fields if is_blank(data.get(field))]


def parse_id(value):
    """Coerce a positive integer id from JSON input; None when it is not one."""
    if isinstance(value, bool):
        return None
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return None
    return parsed if parsed > 0 else None


def validate_submission(answers, questions):
    if not isinstance(questions, list) or not questions:
        raise ValueError("Questions must be a non-empty list.")
    for question in questions:
        if not isinstance(question, dict):
            raise ValueError("Each question must be an object.")
    if not isinstance(answers, (list, dict)):
        raise ValueError("Answers must be a list or an object.")

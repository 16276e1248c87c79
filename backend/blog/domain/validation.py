"""Validation rules for article form submissions."""

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 40
BODY_MIN_LENGTH = 10


def validate_article_form(title: str, body: str) -> dict[str, str]:
    """Check title and body independently and return field -> message.

    Lengths are counted in code points, so ``len`` on ``str`` is exact.
    An empty mapping means the submission is valid.
    """
    errors: dict[str, str] = {}

    if title == "":
        errors["title"] = "title required"
    elif not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
        errors["title"] = f"title length must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH}"

    if body == "":
        errors["body"] = "body required"
    elif len(body) < BODY_MIN_LENGTH:
        errors["body"] = f"body length must be at least {BODY_MIN_LENGTH}"

    return errors

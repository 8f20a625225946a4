import json
import logging
from functools import lru_cache
from importlib.resources import files as resource_files
from typing import Any, Dict

from jsonschema import Draft202012Validator

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _load_item_schema() -> Dict[str, Any]:
    """
    Load the bundled item JSON schema from satchel/schemas.

    The function is cached since the schema is static.
    """
    text = resource_files('satchel.schemas').joinpath('item.schema.json').read_text(encoding='utf-8')
    logger.debug('Loaded item schema resource')
    return json.loads(text)


def validate_item_dict(data: Dict[str, Any]) -> None:
    """
    Validate a (possibly nested) item dictionary against the item JSON schema.

    Raises:
        jsonschema.ValidationError if the data is invalid.
    """
    schema = _load_item_schema()
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        # Log all errors, then raise the first to provide a clear exception
        for err in errors:
            logger.error('Item schema validation error at %s: %s', list(err.path), err.message)
        raise errors[0]


__all__ = [
    'validate_item_dict',
]

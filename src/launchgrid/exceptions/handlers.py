"""
Error conversion utilities.

Value models validate themselves with pydantic. Code that accepts raw
caller input (CLI arguments, ``PaletteColor.coerce``) converts the resulting
``ValidationError`` into an ``InvalidArgumentError`` so callers only need to
handle the launchgrid hierarchy:

```python
from pydantic import ValidationError
from launchgrid.exceptions import wrap_pydantic_error

try:
    color = RgbColor(r=r, g=g, b=b)
except ValidationError as e:
    raise wrap_pydantic_error(e) from e
```
"""

import logging

from pydantic import ValidationError

from .codec import InvalidArgumentError

logger = logging.getLogger(__name__)


def wrap_pydantic_error(error: ValidationError) -> InvalidArgumentError:
    """
    Convert a pydantic ValidationError to an InvalidArgumentError.

    Only the first failing field is reported.

    Args:
        error: Pydantic validation error

    Returns:
        InvalidArgumentError describing the first failing field
    """
    errors = error.errors()
    if not errors:
        return InvalidArgumentError(field="value", value=None, constraint=str(error))

    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "value"
    value = first.get("input")
    constraint = first.get("msg", "invalid value")

    logger.debug(f"Wrapped validation error for {field}: {constraint}")
    return InvalidArgumentError(field=field, value=value, constraint=constraint)

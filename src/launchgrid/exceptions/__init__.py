"""
Custom exception hierarchy for launchgrid.

## Exception Hierarchy

```
LaunchGridError (base)
├── InvalidArgumentError   (also a ValueError)
└── TransportError
```

Range violations on value models surface as ``pydantic.ValidationError``
(itself a ``ValueError``); encoder operations raise ``InvalidArgumentError``
for constraints that span several values (batch sizes, duty-cycle ratios)
and for instances built with ``model_construct()`` that skipped validation.
Both are raised before any bytes reach the device.
"""

from .base import LaunchGridError
from .codec import InvalidArgumentError
from .handlers import wrap_pydantic_error
from .transport import TransportError

__all__ = [
    "InvalidArgumentError",
    "LaunchGridError",
    "TransportError",
    "wrap_pydantic_error",
]

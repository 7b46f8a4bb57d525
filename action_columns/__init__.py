from .buttons import (
    DEFAULT_BUTTONS,
    DefaultButton,
)

from .renderer import (
    RowActionRenderer,
    parse_template,
)

from .routing import (
    ROUTE_PARAM,
    ReverseRouter,
)

from .visibility import (
    VisibilityRule,
)

from .columns import (
    ActionColumn,
)

from .table_mixins import (
    ActionColumnMixin,
)

__all__ = [
    'DEFAULT_BUTTONS',
    'DefaultButton',
    'RowActionRenderer',
    'parse_template',
    'ROUTE_PARAM',
    'ReverseRouter',
    'VisibilityRule',
    'ActionColumn',
    'ActionColumnMixin',
]

# pylint: disable=missing-class-docstring,missing-function-docstring
"""
Configuration for django-action-columns.

Settings can be overridden in Django settings.py using the prefix ACTION_COLUMNS_
"""

from django.conf import settings


# Rendering Settings
DEFAULT_TEMPLATE = getattr(
    settings, "ACTION_COLUMNS_DEFAULT_TEMPLATE", "{view} {update} {delete}"
)
"""
Template used by action columns that do not set their own.
Default: '{view} {update} {delete}'
"""

ICON_CLASS = getattr(
    settings, "ACTION_COLUMNS_ICON_CLASS", "glyphicon glyphicon-{icon}"
)
"""
CSS class of the icon <span> inside default buttons. '{icon}' is replaced
with the button's icon name (eye-open, pencil, trash).
Default: 'glyphicon glyphicon-{icon}'
"""

HEADER_CLASS = getattr(settings, "ACTION_COLUMNS_HEADER_CLASS", "action-column")
"""
CSS class applied to the action column's <th>.
Default: 'action-column'
"""

CELL_CLASS = getattr(settings, "ACTION_COLUMNS_CELL_CLASS", "text-center")
"""
CSS class applied to the action column's <td>.
Default: 'text-center'
"""

# Collaborators
ROUTER = getattr(
    settings, "ACTION_COLUMNS_ROUTER", "action_columns.routing.ReverseRouter"
)
"""
Dotted path of the router class used to build button URLs when a column has
neither a router nor a url_creator of its own.
Default: 'action_columns.routing.ReverseRouter'
Set to None to require every column to supply one.
"""

TRANSLATOR = getattr(
    settings, "ACTION_COLUMNS_TRANSLATOR", "django.utils.translation.gettext"
)
"""
Dotted path of the callable used to translate default button labels.
Default: 'django.utils.translation.gettext'
Set to None to require every column using default buttons to supply one.
"""

"""
Row action rendering shared by ActionColumn and the action template tags.
"""
import collections
import functools
import logging
import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string
from django.utils.safestring import mark_safe

from action_columns import conf
from action_columns.buttons import DEFAULT_BUTTONS, make_default_button
from action_columns.routing import ROUTE_PARAM
from action_columns.visibility import VisibilityRule, resolve_visibility


logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r'\{([\w\-/]+)\}', re.ASCII)

Segment = collections.namedtuple('Segment', ['text', 'name'])
"""A piece of a template: literal text (name is None) or a '{name}' placeholder."""


@functools.lru_cache(maxsize=256)
def parse_template(template):
    """Split a template into an ordered tuple of literal and placeholder segments."""
    segments = []
    position = 0
    for match in PLACEHOLDER_RE.finditer(template):
        if match.start() > position:
            segments.append(Segment(template[position:match.start()], None))
        segments.append(Segment(match.group(0), match.group(1)))
        position = match.end()
    if position < len(template):
        segments.append(Segment(template[position:], None))
    return tuple(segments)


def load_collaborator(path, setting_name):
    if path is None:
        return None
    try:
        return import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(
            f"ACTION_COLUMNS_{setting_name} refers to '{path}', which could not be imported."
        ) from exc


class RowActionRenderer:
    """
    Renders the action buttons of one row from a template such as '{view} {update} {delete}'.

    Every '{name}' token is replaced by the output of the button registered under
    `name`, provided the button is visible for the row. Unknown tokens render as ''.

    CONFIGURATION (class attributes, overridable as keyword arguments):
        template = conf.DEFAULT_TEMPLATE
            Layout of the cell. Defaults for view/update/delete are only created
            for tokens that appear here.

        controller = None
            Prefix of the route, e.g. 'item' routes '{view}' to 'item/view'.

        buttons = {}
            name -> callable(url, model, key) returning the button HTML.

        visible_buttons = {}
            name -> bool or callable(model, key, index). Missing names are visible.

        button_options = {}
            Extra <a> attributes for the default buttons.

        url_creator = None
            callable(action, model, key, index, renderer) -> url. Replaces the router.

        router = None
            Object with to_route(params). Defaults to conf.ROUTER.

        translator = None
            callable(message) -> str for default labels. Defaults to conf.TRANSLATOR.

        Callables set as class attributes must be wrapped in staticmethod().

    EXAMPLE:
        renderer = RowActionRenderer(
            template='{view} {publish}',
            controller='articles',
            buttons={'publish': lambda url, model, key: format_html('<a href="{}">Publish</a>', url)},
            visible_buttons={'publish': lambda model, key, index: not model.published},
        )
        renderer.render_row(article, article.pk, 0)
    """
    template = None
    controller = None
    buttons = None
    visible_buttons = None
    button_options = None
    url_creator = None
    router = None
    translator = None
    default_buttons = DEFAULT_BUTTONS
    icon_class = None

    def __init__(self, *, template=None, controller=None, buttons=None,
                 visible_buttons=None, button_options=None, url_creator=None,
                 router=None, translator=None):
        if template is not None:
            self.template = template
        if self.template is None:
            self.template = conf.DEFAULT_TEMPLATE
        if controller is not None:
            self.controller = controller
        if url_creator is not None:
            self.url_creator = url_creator
        if router is not None:
            self.router = router
        if translator is not None:
            self.translator = translator

        self.button_options = dict(
            button_options if button_options is not None else self.button_options or {}
        )
        registry = dict(self.buttons or {})
        if buttons is not None:
            registry.update(buttons)
        # None unregisters a name, letting the default take its place
        registry = {name: button for name, button in registry.items() if button is not None}
        rules = dict(self.visible_buttons or {})
        if visible_buttons is not None:
            rules.update(visible_buttons)
        self.visible_buttons = MappingProxyType(
            {name: VisibilityRule.coerce(rule) for name, rule in rules.items()}
        )

        if self.url_creator is None and self.router is None:
            router_class = load_collaborator(conf.ROUTER, 'ROUTER')
            if router_class is None:
                raise ImproperlyConfigured(
                    f"{self.__class__.__name__} requires a 'router' or a 'url_creator'."
                )
            self.router = router_class()

        self.buttons = MappingProxyType(self.init_default_buttons(registry))

    def __deepcopy__(self, memo):
        # Read-only once initialized; tables deep-copy their columns per instance
        return self

    def init_default_buttons(self, registry):
        """Add a default button for every default token used by the template but not registered."""
        for button in self.default_buttons:
            self.init_default_button(registry, button)
        return registry

    def init_default_button(self, registry, button):
        if button.name in registry or '{%s}' % button.name not in self.template:
            return
        if self.translator is None:
            self.translator = load_collaborator(conf.TRANSLATOR, 'TRANSLATOR')
            if self.translator is None:
                raise ImproperlyConfigured(
                    f"{self.__class__.__name__} requires a 'translator' to render "
                    f"the default '{button.name}' button."
                )
        registry[button.name] = make_default_button(
            button, self.translator, self.button_options, self.icon_class
        )
        logger.debug("Added default '%s' button to %s", button.name, self.__class__.__name__)

    def create_url(self, action, model, key, index) -> str:
        """
        Return the URL of `action` for the row.

        A url_creator takes over completely. Otherwise a mapping key is used as
        the route parameters and any other key becomes {'id': str(key)}.
        """
        if self.url_creator is not None:
            return self.url_creator(action, model, key, index, self)

        params = get_key_params(key)
        params[ROUTE_PARAM] = f"{self.controller}/{action}" if self.controller else action
        return self.router.to_route(params)

    def is_button_visible(self, name, model, key, index) -> bool:
        return resolve_visibility(self.visible_buttons, name, model, key, index)

    def render_button(self, name, model, key, index) -> str:
        if not self.is_button_visible(name, model, key, index):
            return ''
        button = self.buttons.get(name)
        if button is None:
            logger.debug("No button registered for placeholder '{%s}'", name)
            return ''
        url = self.create_url(name, model, key, index)
        return button(url, model, key)

    def render_row(self, model, key, index, template=None):
        """Return the cell content for one row, marked safe for templates."""
        if template is None:
            template = self.template
        parts = []
        for segment in parse_template(template):
            if segment.name is None:
                parts.append(segment.text)
            else:
                parts.append(self.render_button(segment.name, model, key, index))
        return mark_safe(''.join(parts))


def get_key_params(key):
    """Return a fresh dict of route parameters for a row key."""
    if isinstance(key, Mapping):
        return dict(key)
    if key is None or (isinstance(key, Iterable) and not isinstance(key, str)):
        raise ValueError(f"Row key must be a scalar or a mapping, got {key!r}")
    return {'id': str(key)}

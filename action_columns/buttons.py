"""
Default view/update/delete buttons for action columns.
"""
import collections

from django.forms.utils import flatatt
from django.utils.html import format_html
from django.utils.text import capfirst
from django.utils.translation import gettext_noop

from action_columns import conf


DefaultButton = collections.namedtuple(
    'DefaultButton', ['name', 'icon', 'label', 'options']
)
"""
Description of a button synthesized when the template asks for it.

- name: token name in the template, e.g. 'view' for '{view}'
- icon: icon name substituted into conf.ICON_CLASS
- label: untranslated title/aria-label, or None to use the capitalized name
- options: extra <a> attributes; string values are translated
"""

DEFAULT_BUTTONS = (
    DefaultButton('view', 'eye-open', gettext_noop('View'), {}),
    DefaultButton('update', 'pencil', gettext_noop('Update'), {}),
    DefaultButton('delete', 'trash', gettext_noop('Delete'), {
        'data-confirm': gettext_noop('Are you sure you want to delete this item?'),
        'data-method': 'post',
    }),
)

# Attribute values that are markers, not messages
UNTRANSLATED_OPTIONS = ('data-method', 'data-pjax')


def render_icon(icon, icon_class=None):
    """Return the <span> used as the visible part of a default button."""
    icon_class = icon_class or conf.ICON_CLASS
    return format_html('<span class="{}"></span>', icon_class.format(icon=icon))


def make_default_button(button, translator, button_options=None, icon_class=None):
    """
    Build the render callback `(url, model, key) -> str` for a DefaultButton.

    Attributes are merged in this order, later keys winning:
    title/aria-label/data-pjax, the button's own options, then button_options.
    Labels are translated on every call so the active language is used.
    """
    button_options = dict(button_options or {})

    def render(url, model, key):
        title = translator(button.label) if button.label else capfirst(button.name)
        options = {
            'title': title,
            'aria-label': title,
            'data-pjax': '0',
        }
        for attr, value in button.options.items():
            if isinstance(value, str) and attr not in UNTRANSLATED_OPTIONS:
                value = translator(value)
            options[attr] = value
        options.update(button_options)
        return format_html(
            '<a href="{}"{}>{}</a>',
            url,
            flatatt(options),
            render_icon(button.icon, icon_class),
        )

    render.default_button = button
    return render

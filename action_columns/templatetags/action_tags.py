from django import template

register = template.Library()


@register.simple_tag
def row_actions(column, record, index=0):
    """
    Render the action buttons of an ActionColumn for a single record.

    Usage:
        {% load action_tags %}
        {% for record in records %}
            {% row_actions table.columns.actions.column record forloop.counter0 %}
        {% endfor %}
    """
    return column.render_cell(record, index)


@register.simple_tag
def action_url(column, action, record, index=0):
    """Return the URL an ActionColumn builds for `action` on a record."""
    return column.renderer.create_url(action, record, column.get_key(record), index)

import django_tables2 as tables

from action_columns import conf
from action_columns.renderer import RowActionRenderer


class ActionColumn(tables.Column):
    """
    django-tables2 column rendering view/update/delete (or custom) buttons for each row.

    Usage:
        class ArticleTable(tables.Table):
            title = tables.Column()
            actions = ActionColumn(
                controller='articles',
                template='{view} {update} {delete}',
                visible_buttons={'delete': lambda record, key, index: record.is_draft},
            )

    All renderer options (template, controller, buttons, visible_buttons,
    button_options, url_creator, router, translator) are accepted as keyword
    arguments. key_accessor selects the row key: an accessor string resolved
    against the record (default 'pk') or a callable taking the record.
    """
    renderer_class = RowActionRenderer

    def __init__(self, template=None, controller=None, buttons=None,
                 visible_buttons=None, button_options=None, url_creator=None,
                 router=None, translator=None, key_accessor='pk', **extra):
        extra.setdefault('orderable', False)
        extra.setdefault('empty_values', ())
        extra.setdefault('verbose_name', '')
        extra.setdefault('attrs', {
            'th': {'class': conf.HEADER_CLASS},
            'td': {'class': conf.CELL_CLASS},
        })
        super().__init__(**extra)
        self.key_accessor = key_accessor
        self.renderer = self.renderer_class(
            template=template,
            controller=controller,
            buttons=buttons,
            visible_buttons=visible_buttons,
            button_options=button_options,
            url_creator=url_creator,
            router=router,
            translator=translator,
        )

    def get_key(self, record):
        """Return the key used to build this record's action URLs."""
        if callable(self.key_accessor):
            return self.key_accessor(record)
        return tables.A(self.key_accessor).resolve(record)

    def render_cell(self, record, index):
        return self.renderer.render_row(record, self.get_key(record), index)

    def render(self, record, bound_row):
        return self.render_cell(record, bound_row.row_counter)

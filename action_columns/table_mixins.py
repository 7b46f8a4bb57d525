import collections

from action_columns.columns import ActionColumn


class ActionColumnMixin:
    """
    Mixin for django-tables2 Table classes to add an action column built from class attributes.

    Usage:
        class ArticleTable(ActionColumnMixin, tables.Table):
            action_controller = 'articles'
            action_template = '{view} {update} {delete}'
            action_visible_buttons = {
                'delete': lambda record, key, index: record.is_draft,
            }

            title = tables.Column()

    The column is named 'actions' (see action_column_name) and is appended after the
    declared columns unless action_column_first is set. Pass has_action_column=False
    when instantiating the table to hide it for that instance.
    """
    has_action_column = True  # Toggle this to enable/disable the action column
    action_column_name = 'actions'
    action_column_first = False
    action_column_verbose_name = ''

    action_template = None
    action_controller = None
    action_buttons = None
    action_visible_buttons = None
    action_button_options = None
    action_url_creator = None
    action_router = None
    action_translator = None
    action_key_accessor = 'pk'

    def __new__(cls, *args, **kwargs):
        name = cls.action_column_name
        # Build the column once per class; a parent's column copied into
        # base_columns by the metaclass does not count
        if cls.__dict__.get('_action_column_built'):
            return super().__new__(cls)
        cls._action_column_built = True
        inherited = cls.base_columns.get(name)
        if inherited is not None and inherited is not getattr(cls, '_action_column', None):
            # Declared on the table itself, keep it as is
            return super().__new__(cls)
        cls.base_columns.pop(name, None)
        if not getattr(cls, 'has_action_column', True):
            return super().__new__(cls)
        cls._action_column = cls.base_columns[name] = cls.get_action_column()
        if cls.action_column_first:
            cls.base_columns = collections.OrderedDict(
                [(name, cls.base_columns[name])] +
                [(k, v) for k, v in cls.base_columns.items() if k != name]
            )
        return super().__new__(cls)

    def __init__(self, *args, has_action_column=None, **kwargs):
        super().__init__(*args, **kwargs)
        if has_action_column is not None:
            self.has_action_column = has_action_column
        if not self.has_action_column and self.action_column_name in self.columns:
            self.columns.hide(self.action_column_name)

    @classmethod
    def get_action_column(cls):
        """Return the ActionColumn instance added to the table."""
        return ActionColumn(
            template=cls.action_template,
            controller=cls.action_controller,
            buttons=cls.action_buttons,
            visible_buttons=cls.action_visible_buttons,
            button_options=cls.action_button_options,
            url_creator=cls.action_url_creator,
            router=cls.action_router,
            translator=cls.action_translator,
            key_accessor=cls.action_key_accessor,
            verbose_name=cls.action_column_verbose_name,
        )

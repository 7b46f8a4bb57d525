"""
Tests for ActionColumn and ActionColumnMixin
"""
from django.template import Context, Template
from django.test import TestCase
import django_tables2 as tables

from action_columns.columns import ActionColumn
from action_columns.table_mixins import ActionColumnMixin


class TestActionColumn(TestCase):
    """Test cases for ActionColumn"""

    def test_default_buttons_in_table(self):
        """Test that the column renders view/update/delete links for each record"""

        class TestTable(tables.Table):
            name = tables.Column()
            actions = ActionColumn()

        table = TestTable([{'pk': 5, 'name': 'Widget'}])
        html = table.rows[0].get_cell('actions')

        self.assertInHTML(
            '<a href="/view/?id=5" title="View" aria-label="View" data-pjax="0">'
            '<span class="glyphicon glyphicon-eye-open"></span></a>',
            html,
        )
        self.assertInHTML(
            '<a href="/update/5/" title="Update" aria-label="Update" data-pjax="0">'
            '<span class="glyphicon glyphicon-pencil"></span></a>',
            html,
        )
        self.assertInHTML(
            '<a href="/delete/5/" title="Delete" aria-label="Delete" data-pjax="0" '
            'data-confirm="Are you sure you want to delete this item?" data-method="post">'
            '<span class="glyphicon glyphicon-trash"></span></a>',
            html,
        )

    def test_column_is_not_orderable(self):
        """Test the column's defaults"""

        class TestTable(tables.Table):
            actions = ActionColumn()

        table = TestTable([])
        self.assertFalse(table.columns['actions'].orderable)
        self.assertEqual(table.columns['actions'].column.attrs['th']['class'], 'action-column')

    def test_key_accessor(self):
        """Test that the key can come from another field or a callable"""
        by_slug = ActionColumn(template='{view}', controller='item', key_accessor='slug')
        by_callable = ActionColumn(
            template='{translate}',
            controller='item',
            key_accessor=lambda record: {'id': record['pk'], 'lang': record['lang']},
            buttons={'translate': lambda url, model, key: url},
        )
        record = {'pk': 7, 'slug': 'widget', 'lang': 'en'}

        self.assertIn('href="/item/view/?id=widget"', by_slug.render_cell(record, 0))
        self.assertEqual(by_callable.render_cell(record, 0), '/item/7/en/')

    def test_visibility_per_record(self):
        """Test that visible_buttons callables see each table record"""

        class TestTable(tables.Table):
            name = tables.Column()
            actions = ActionColumn(
                template='{update}',
                visible_buttons={'update': lambda record, key, index: record['name'] != 'Locked'},
            )

        table = TestTable([{'pk': 1, 'name': 'Open'}, {'pk': 2, 'name': 'Locked'}])

        self.assertIn('/update/1/', table.rows[0].get_cell('actions'))
        self.assertEqual(table.rows[1].get_cell('actions'), '')

    def test_row_index_passed_to_visibility(self):
        """Test that each table row passes its position as the index"""
        seen = []

        def record_index(record, key, index):
            seen.append((key, index))
            return True

        class TestTable(tables.Table):
            name = tables.Column()
            actions = ActionColumn(template='{update}', visible_buttons={'update': record_index})

        table = TestTable([{'pk': 1, 'name': 'First'}, {'pk': 2, 'name': 'Second'}])
        for row in table.rows:
            row.get_cell('actions')

        self.assertEqual(seen, [(1, 0), (2, 1)])


class TestActionColumnMixin(TestCase):
    """Test cases for ActionColumnMixin"""

    def test_mixin_adds_column(self):
        """Test that the mixin adds an actions column built from class attributes"""

        class TestTable(ActionColumnMixin, tables.Table):
            action_controller = 'item'
            action_template = '{update} {delete}'
            action_button_options = {'class': 'btn btn-sm'}

            name = tables.Column()

        table = TestTable([{'pk': 5, 'name': 'Widget'}])

        self.assertIn('actions', table.columns)
        self.assertEqual(table.columns.names()[-1], 'actions')
        html = table.rows[0].get_cell('actions')
        self.assertIn('href="/item/5/update/"', html)
        self.assertIn('href="/item/5/delete/"', html)
        self.assertIn('class="btn btn-sm"', html)

    def test_column_first(self):
        """Test that the column can be moved to the first position"""

        class TestTable(ActionColumnMixin, tables.Table):
            action_column_first = True

            name = tables.Column()

        table = TestTable([])
        self.assertEqual(table.columns.names()[0], 'actions')

    def test_subclass_builds_its_own_column(self):
        """Test that a subclass uses its own settings after the parent was instantiated"""

        class ParentTable(ActionColumnMixin, tables.Table):
            action_template = '{update}'

            name = tables.Column()

        parent = ParentTable([{'pk': 5, 'name': 'Widget'}])

        class ChildTable(ParentTable):
            action_controller = 'item'

        child = ChildTable([{'pk': 5, 'name': 'Widget'}])

        self.assertIn('href="/update/5/"', parent.rows[0].get_cell('actions'))
        self.assertIn('href="/item/5/update/"', child.rows[0].get_cell('actions'))
        self.assertIn('href="/update/5/"', ParentTable([{'pk': 5}]).rows[0].get_cell('actions'))

    def test_subclass_can_drop_column(self):
        """Test that a subclass can turn off the column its parent added"""

        class ParentTable(ActionColumnMixin, tables.Table):
            name = tables.Column()

        ParentTable([])

        class ChildTable(ParentTable):
            has_action_column = False

        self.assertNotIn('actions', ChildTable([]).columns)

    def test_declared_column_is_kept(self):
        """Test that an actions column declared on the table is not replaced"""

        class TestTable(ActionColumnMixin, tables.Table):
            action_controller = 'item'

            actions = ActionColumn(template='{delete}')

        html = TestTable([{'pk': 5}]).rows[0].get_cell('actions')
        self.assertIn('href="/delete/5/"', html)
        self.assertNotIn('/update/', html)

    def test_mixin_visibility(self):
        """Test that action_visible_buttons configures the column's visibility rules"""

        class TestTable(ActionColumnMixin, tables.Table):
            action_template = '{update}|{delete}'
            action_visible_buttons = {
                'delete': lambda record, key, index: record['name'] != 'Locked',
            }

            name = tables.Column()

        table = TestTable([{'pk': 1, 'name': 'Open'}, {'pk': 2, 'name': 'Locked'}])

        self.assertIn('href="/delete/1/"', table.rows[0].get_cell('actions'))
        self.assertNotIn('/delete/', table.rows[1].get_cell('actions'))
        self.assertIn('href="/update/2/"', table.rows[1].get_cell('actions'))

    def test_actions_table_disabled(self):
        """Test that the action column can be disabled entirely"""

        class TestTable(ActionColumnMixin, tables.Table):
            has_action_column = False

            name = tables.Column()

        table = TestTable([])
        self.assertNotIn('actions', table.columns)

    def test_actions_table_disabled_at_runtime(self):
        """Test that the action column can be hidden at instantiation"""

        class TestTable(ActionColumnMixin, tables.Table):
            name = tables.Column()

        hidden = TestTable([], has_action_column=False)
        shown = TestTable([])

        self.assertFalse(hidden.has_action_column)
        self.assertFalse(hidden.columns['actions'].visible)
        self.assertTrue(shown.columns['actions'].visible)


class TestActionTags(TestCase):
    """Test cases for the action_tags template library"""

    def test_row_actions_tag(self):
        """Test that row_actions renders unescaped buttons"""
        column = ActionColumn(template='{view}', controller='item')
        template = Template('{% load action_tags %}{% row_actions column record 0 %}')

        html = template.render(Context({'column': column, 'record': {'pk': 5}}))

        self.assertHTMLEqual(
            html,
            '<a href="/item/view/?id=5" title="View" aria-label="View" data-pjax="0">'
            '<span class="glyphicon glyphicon-eye-open"></span></a>',
        )

    def test_action_url_tag(self):
        """Test that action_url returns the routed URL of one action"""
        column = ActionColumn(template='', controller='item')
        template = Template('{% load action_tags %}{% action_url column "update" record %}')

        self.assertEqual(template.render(Context({'column': column, 'record': {'pk': 5}})), '/item/5/update/')

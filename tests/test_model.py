import pytest

from pyinidoc import (
    BlankLine,
    Comment,
    CommentChar,
    DuplicateSection,
    IniConfig,
    IniDocument,
    InvalidArgument,
    InvalidName,
    LoadSettings,
    Property,
    PropertyValue,
    Section,
)


class TestConstruction:
    def test_section_items_become_comments_and_blank_lines(self):
        section = Section('Players', 'This section defines the players',
                          '', '   ', None)
        items = section.minor_items
        assert [type(i) for i in items] == \
            [Comment, BlankLine, BlankLine, BlankLine]
        assert items[0].text == 'This section defines the players'
        assert items[1].padding.left == 0
        assert items[2].padding.left == 3
        assert list(section.comments) == [items[0]]

    def test_property_items(self):
        prop = Property('Player1', 'Ryan', '; first player', '')
        assert prop.value == 'Ryan'
        assert [type(i) for i in prop.minor_items] == [Comment, BlankLine]

    @pytest.mark.parametrize('name', [None, '', '   ', '\t'])
    def test_invalid_names(self, name):
        with pytest.raises(InvalidName):
            Section(name)
        with pytest.raises(InvalidArgument):
            Property(name, 'value')

    def test_names_are_trimmed(self):
        assert Section('  Game  ').name == 'Game'
        assert Property(' key ', 1).name == 'key'

    def test_add_comment_and_blank_line(self):
        section = Section('S')
        comment = section.add_comment('hello')
        blank = section.add_blank_line()
        assert section.minor_items == [comment, blank]
        assert str(comment) == '; hello'
        assert str(blank) == ''

    def test_default_rendering(self):
        assert str(Section('S')) == '[S]'
        assert str(Property('a', 'b')) == 'a = b'
        assert str(Comment('note')) == '; note'

    def test_configured_defaults(self):
        config = (IniConfig()
                  .allow_hash_for_comments(set_as_default=True)
                  .set_section_padding_defaults(inside_left=1, inside_right=1)
                  .set_property_padding_defaults(left=4))
        assert str(Section('S', config=config)) == '[ S ]'
        assert str(Property('a', 'b', config=config)) == '    a = b'
        comment = Comment('note', config=config)
        assert comment.char is CommentChar.HASH
        assert str(comment) == '# note'

    def test_config_is_not_retroactive(self):
        config = IniConfig()
        prop = Property('a', 'b', config=config)
        config.set_property_padding_defaults(left=2)
        assert str(prop) == 'a = b'
        prop.padding.reset()
        assert str(prop) == '  a = b'


class TestSection:
    def test_set_appends_then_mutates(self):
        section = Section('Flash')
        section['Level'] = 9
        assert len(section) == 1
        assert section['Level'].as_int() == 9

        section['Level'] = 10
        assert len(section) == 1
        assert int(section['Level']) == 10

    def test_missing_property_is_empty(self):
        section = Section('S')
        assert section['X'] is PropertyValue.EMPTY
        assert 'X' not in section

    def test_lookup_returns_first_match(self):
        section = Section('S')
        section.add(Property('k', 'first'))
        section.add(Property('k', 'second'))
        assert section['k'] == 'first'

        section['k'] = 'changed'
        assert section[0].value == 'changed'
        assert section[1].value == 'second'

        del section['k']
        assert section['k'] == 'second'

    def test_lookup_is_case_sensitive(self):
        section = Section('S')
        section['Key'] = 1
        assert section['key'] is PropertyValue.EMPTY

    def test_index_access(self):
        section = Section('S')
        section['a'] = 1
        section['b'] = 2
        assert [i.name for i in section] == ['a', 'b']
        section[0] = Property('c', 3)
        assert section.names() == ['c', 'b']
        assert section['c'] == '3'
        assert 'a' not in section
        with pytest.raises(InvalidArgument):
            section[0] = 'not a property'

    def test_index_assignment_refuses_same_object_twice(self):
        section = Section('S')
        a = section.add(Property('a', 1))
        section.add(Property('b', 2))
        with pytest.warns(UserWarning):
            section[1] = a
        assert section.names() == ['a', 'b']
        section[0] = a
        assert section.names() == ['a', 'b']

    def test_insert_remove_pop(self):
        section = Section('S')
        a = section.add(Property('a', 1))
        section.insert(0, Property('b', 2))
        assert section.names() == ['b', 'a']
        assert section.index('a') == 1
        section.remove(a)
        assert section.names() == ['b']
        assert section.pop().name == 'b'
        assert len(section) == 0
        with pytest.raises(KeyError):
            del section['missing']

    def test_adding_same_property_twice_warns(self):
        section = Section('S')
        prop = section.add(Property('a', 1))
        with pytest.warns(UserWarning):
            section.add(prop)
        assert len(section) == 1

    def test_rename_property(self):
        section = Section('S')
        section['old'] = 1
        assert section.rename_property('old', 'new')
        assert section['new'] == '1'
        assert section['old'] is PropertyValue.EMPTY
        assert not section.rename_property('missing', 'x')

    def test_get_with_converters(self):
        section = Section('S')
        section['Masked'] = True
        section['Level'] = 9
        section['Power'] = 'Superstrength, heat vision'
        assert section.get('Masked', bool) is True
        assert section.getbool('Masked') is True
        assert section.get('Level', int) == 9
        assert section.get('Missing', int, 5) == 5
        assert section.getlist('Power') == ['Superstrength', 'heat vision']
        assert section.getlist('Missing') == []
        assert section.get('Level') == '9'

    def test_repr(self):
        section = Section('S')
        section['a'] = 1
        assert repr(section) == '[S] { .cnt = 1 }'


class TestDocument:
    def test_lookup(self):
        doc = IniDocument()
        players = doc.add(Section('Players'))
        assert doc['players'] is players
        assert doc[0] is players
        assert doc['Missing'] is None
        assert 'PLAYERS' in doc
        assert players in doc

    def test_lookup_follows_case_sensitivity_changes(self):
        doc = IniDocument()
        game = doc.add(Section('Game'))
        assert doc['game'] is game

        doc.settings.case_sensitive = True
        assert doc['game'] is None
        assert doc['Game'] is game

        doc.settings = LoadSettings()
        assert doc['GAME'] is game

    def test_duplicate_section_refused(self):
        doc = IniDocument()
        doc.add(Section('Players'))
        with pytest.raises(DuplicateSection):
            doc.add(Section('players'))
        with pytest.raises(InvalidArgument):
            doc.insert(0, Section('Players'))
        assert len(doc) == 1

    def test_setdefault(self):
        doc = IniDocument()
        first = doc.setdefault('A')
        assert doc.setdefault('a') is first
        assert len(doc) == 1

    def test_rename(self):
        doc = IniDocument()
        doc.add(Section('A'))
        doc.add(Section('B'))
        assert not doc.rename('Missing', 'C')
        assert not doc.rename('A', 'b')
        assert doc.rename('A', 'C')
        assert doc.names() == ['C', 'B']
        assert doc['A'] is None
        assert doc['c'] is doc[0]
        assert doc.rename('C', 'c')
        assert doc[0].name == 'c'

    def test_set_section_from_mapping(self):
        doc = IniDocument()
        doc['New'] = {'a': 1, 'b': True}
        assert doc['New']['a'] == '1'
        assert doc['New']['b'] == '1'

        doc['new'] = {'c': 'x'}
        assert len(doc) == 1
        assert doc['New'].names() == ['c']

    def test_set_section_object(self):
        doc = IniDocument()
        doc.add(Section('A'))
        doc.add(Section('B'))
        replacement = Section('a')
        doc['A'] = replacement
        assert doc[0] is replacement
        with pytest.raises(InvalidArgument):
            doc['B'] = Section('Other')

    def test_delete_and_remove(self):
        doc = IniDocument()
        a = doc.add(Section('A'))
        doc.add(Section('B'))
        doc.add(Section('C'))
        del doc['b']
        assert doc.names() == ['A', 'C']
        doc.remove(a)
        assert doc.names() == ['C']
        assert doc.index('c') == 0
        with pytest.raises(KeyError):
            del doc['missing']
        assert doc.pop().name == 'C'
        assert len(doc) == 0

    def test_clear(self):
        doc = IniDocument.loads('[A]\n; tail\n')
        doc.clear()
        assert len(doc) == 0
        assert doc.trailing_items == []
        assert doc.dumps() == ''

    def test_sections_view_is_a_copy(self):
        doc = IniDocument()
        doc.add(Section('A'))
        view = doc.sections
        doc.add(Section('B'))
        assert len(view) == 1

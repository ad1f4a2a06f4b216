import pytest
import docmapper
from docmapper import ArrayIndexMode, DocumentMapper


def test_repr():
    m = DocumentMapper(False, ArrayIndexMode.EXPLICIT)
    assert repr(m) == 'DocumentMapper(set_nulls=False, array_index_mode=EXPLICIT)'


def test_set_then_get():
    m = DocumentMapper()
    d = {}
    for key, value in (('a', 1), ('b', 'two'), ('c', [3]), ('d', {'e': 4}), ('f', None)):
        m.set_value(d, key, value)
        assert m.get_value(d, key) == value


def test_nested_round_trip():
    m = DocumentMapper()
    d = {}
    m.set_value(d, 'a.b.c', 'v')
    assert m.get_value(d, 'a.b.c') == 'v'
    assert m.get_value(d, 'a.b') == {'c': 'v'}


def test_set_value_expressions():
    m = DocumentMapper()
    d = {}
    m.set_value(d, 'someProp.subkey.subkey2.subkey3.subkey4.0.subDude', 'fred')
    m.set_value(d, 'anotherProp', 'fred')
    m.set_value(d, 'anotherPropMore.sub', 'fred')
    m.set_value(d, 'nullValue', None)

    assert d['someProp'] == {'subkey': {'subkey2': {'subkey3': {'subkey4': [{'subDude': 'fred'}]}}}}
    assert d['anotherProp'] == 'fred'
    assert d['anotherPropMore'] == {'sub': 'fred'}
    assert 'nullValue' in d and d['nullValue'] is None


def test_set_value_no_nulls():
    m = DocumentMapper(False)
    d = {}
    m.set_value(d, 'test1', None)
    assert 'test1' not in d


def test_get_value_default():
    m = DocumentMapper()
    assert m.get_value({}, 'missing') is None
    assert m.get_value({}, 'missing', default='x') == 'x'
    assert m.get_value({'a': None}, 'a', default='x') is None


def test_get_value_no_expressions():
    assert DocumentMapper().get_value({'a': 1}, default=7) == 7


def test_get_value_single_propagates():
    m = DocumentMapper()
    with pytest.raises(docmapper.NavigationError):
        m.get_value({'first': 'key'}, 'first.0.key.whatever')


def test_get_value_first_not_null():
    m = DocumentMapper()
    d = {'first': 'key'}
    assert m.get_value(d, 'not-existing-key', 'first.0.key.whatever', 'first') == 'key'
    assert m.get_value(d, 'not-existing-key', 'first.0.key.whatever') is None


def test_get_value_first_skips_nulls():
    m = DocumentMapper()
    d = {'a': None, 'b': 0}
    assert m.get_value(d, 'a', 'b') == 0


def test_get_value_not_document():
    with pytest.raises(TypeError, match='Cannot read list'):
        DocumentMapper().get_value([1, 2], '0')


def test_set_value_not_document():
    with pytest.raises(TypeError, match='Cannot update str'):
        DocumentMapper().set_value('hello', 'a', 1)


def test_set_value_propagates():
    with pytest.raises(docmapper.IndexWriteError):
        DocumentMapper().set_value({'a': 'b'}, 'a.0', 1)


def test_mapping_from_other_document():
    m = DocumentMapper(True, ArrayIndexMode.EXPLICIT)

    doc_a = {'simpleVal': 'value', 'embedded': {'subKey': 'subVal', 'subInt': 33}}
    doc_b = {}

    for _ in range(3):
        m.map(doc_a, 'simpleVal', doc_b, 'objectList.0.subDude')

    m.set_value(doc_b, 'objectList.0.subDude', 'fred')
    m.set_value(doc_b, 'objectList.1.subDude', 'fred2')

    for _ in range(3):
        m.map(doc_a, 'simpleVal', doc_b, 'arrayList.0')

    m.map(doc_a, 'embedded.subKey', doc_b, 'dude.theKeeee')
    m.map(doc_a, 'embedded.subInt', doc_b, 'dude.theKeeeeInt')
    m.map(doc_a, 'embedded.subInt', doc_b, 'dude.anotherOne.theKeeeeInt')
    m.set_value(doc_b, 'otherObject.subK', 33)

    new_doc = {'id': 'hans'}
    m.map(new_doc, 'id', doc_b, 'anotherDoc.id')
    m.map(new_doc, 'not-existing-key', doc_b, 'anotherDoc.id2')

    assert doc_b['objectList'] == [{'subDude': 'fred'}, {'subDude': 'fred2'}]
    assert doc_b['arrayList'] == ['value']
    assert doc_b['dude'] == {'theKeeee': 'subVal', 'theKeeeeInt': 33, 'anotherOne': {'theKeeeeInt': 33}}
    assert doc_b['otherObject'] == {'subK': 33}
    assert doc_b['anotherDoc'] == {'id': 'hans', 'id2': None}


def test_map_missing_no_nulls():
    m = DocumentMapper(False)
    target = {}
    m.map({'id': 'hans'}, 'not-existing-key', target, 'anotherDoc.id2')
    assert target == {}


def test_map_none_documents():
    m = DocumentMapper()
    target = {}
    m.map(None, 'a', target, 'b')
    m.map({'a': 1}, 'a', None, 'b')
    assert target == {}


def test_map_passes_value_by_reference():
    m = DocumentMapper()
    inner = {'x': [1, 2]}
    target = {}
    m.map({'inner': inner}, 'inner', target, 'copy')
    assert target['copy'] is inner


def test_map_read_errors_propagate():
    with pytest.raises(docmapper.IndexAccessError):
        DocumentMapper().map({'a': 'str'}, 'a.0', {}, 'b')


def test_set_values():
    m = DocumentMapper(array_index_mode='explicit')
    d = m.set_values({}, [('l.0', 'a'), ('l.0', 'b'), ('x.y', 1)])
    assert d == {'l': ['b'], 'x': {'y': 1}}


def test_set_values_mapping():
    d = DocumentMapper().set_values({}, {'a.b': 1, 'a.c': 2})
    assert d == {'a': {'b': 1, 'c': 2}}


def test_map_values():
    source = {'name': 'fred', 'tags': ['a', 'b']}
    target = DocumentMapper().map_values(source, {}, [('name', 'person.name'), ('tags.1', 'person.tags.0')])
    assert target == {'person': {'name': 'fred', 'tags': ['b']}}


def test_tab_in_key_round_trip():
    m = DocumentMapper()
    d = {}
    m.set_value(d, 'x\ty', 1)
    m.set_value(d, 'outer.in\tner', 2)
    assert d == {'x\ty': 1, 'outer': {'in\tner': 2}}
    assert m.get_value(d, 'x\ty') == 1
    assert m.get_value({'a\tb': {'c': 3}}, 'a\tb.c') == 3


def test_config_with_options_conflict():
    config = docmapper.MapperConfig()
    with pytest.raises(TypeError, match='config'):
        DocumentMapper(set_nulls=False, config=config)
    with pytest.raises(TypeError, match='config'):
        DocumentMapper(array_index_mode='explicit', config=config)


def test_options_defaults():
    m = DocumentMapper()
    assert m.set_nulls is True
    assert m.array_index_mode is ArrayIndexMode.ADDITIVE

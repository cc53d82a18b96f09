"""
Clone and copy semantics: the copy gets the value, never the version.
"""

import copy

from versioned import INITIAL_VERSION, Versioned


def test_version_reset_on_clone():
    cell = Versioned("Hello")

    cell.value += "World!"
    cell.value = cell.get()[:-1]

    assert cell.get() == "HelloWorld"
    assert cell.version == 2

    cloned = cell.clone()

    assert cloned.get() == cell.get()
    assert cloned.version == INITIAL_VERSION
    assert cell.version == 2


def test_clone_after_single_mutable_access():
    a = Versioned("x")
    a.get_mut()
    b = a.clone()

    assert b.version == 0
    assert a.version == 1


def test_clone_is_deep(versioned_list):
    versioned_list.get_mut()
    cloned = versioned_list.clone()

    assert cloned.get() == versioned_list.get()
    assert cloned.get() is not versioned_list.get()
    assert cloned.get()[2] is not versioned_list.get()[2]

    cloned.get_mut()[2].append(5)

    assert versioned_list.get() == [1, 2, [3, 4]]
    assert versioned_list.version == 1
    assert cloned.version == 1


def test_copy_module_resets_version(versioned_list):
    for _ in range(4):
        versioned_list.get_mut()

    shallow = copy.copy(versioned_list)
    deep = copy.deepcopy(versioned_list)

    assert shallow.version == 0
    assert deep.version == 0

    assert shallow.get() == versioned_list.get()
    assert shallow.get() is not versioned_list.get()
    assert shallow.get()[2] is versioned_list.get()[2]

    assert deep.get()[2] is not versioned_list.get()[2]


def test_copy_of_seeded_cell_resets_version():
    cell = Versioned.with_version(3.5, 1000)

    assert cell.clone().version == INITIAL_VERSION
    assert cell.clone().get() == 3.5


def test_deepcopy_preserves_self_reference():
    cell = Versioned([])
    cell.get_mut().append(cell)

    copied = copy.deepcopy(cell)

    assert copied is not cell
    assert copied.get()[0] is copied
    assert copied.version == INITIAL_VERSION
    assert cell.version == 1

import suite
from arrayiter import (
    A, ArrayIteration, of, from_array_like,
    UnsupportedForSequenceSource, ReadOnlySource, InvalidCallback
)

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

IN_PLACE_CALLS = {
    'copy_within': lambda a: a.copy_within(0, 1),
    'fill': lambda a: a.fill(0),
    'reverse': lambda a: a.reverse(),
    'sort': lambda a: a.sort(),
    'push': lambda a: a.push(1),
    'pop': lambda a: a.pop(),
    'shift': lambda a: a.shift(),
    'unshift': lambda a: a.unshift(1),
    'splice': lambda a: a.splice(0, 1),
}


class Positions:
    """writable array-like with a length attribute"""

    def __init__(self, positions, length):
        self.positions = dict(positions)
        self.length = length

    def __getitem__(self, index):
        return self.positions[index]

    def __setitem__(self, index, value):
        self.positions[index] = value

    def __delitem__(self, index):
        del self.positions[index]


class Legacy:
    """old-style sequence: __len__ and __getitem__ without __iter__"""

    def __init__(self, items):
        self.items = list(items)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __setitem__(self, index, value):
        self.items[index] = value


class Frozen:
    def __len__(self):
        return 2

    def __getitem__(self, index):
        return [1, 2][index]


def snapshot(adapter):
    return list(adapter.entries())


# rejection tests

@test("in-place operations are rejected for pull sources without mutation")
def test_rejected_for_lists():
    data = [3, 1, 2]
    adapter = A(data)
    for name, call in IN_PLACE_CALLS.items():
        error = assert_raises(UnsupportedForSequenceSource, lambda: call(adapter), name)
        assert_equal(error.operation, name)
    assert_equal(data, [3, 1, 2], "the list must be untouched")


@test("in-place operations never consume a generator they reject")
def test_rejected_for_generators():
    cursor = iter(range(3))
    adapter = A(cursor)
    assert_raises(UnsupportedForSequenceSource, lambda: adapter.sort())
    assert_raises(UnsupportedForSequenceSource, lambda: adapter.fill(9))
    assert_raises(UnsupportedForSequenceSource, lambda: adapter.splice(0))
    assert_equal(next(cursor), 0, "nothing should have been pulled")


@test("in-place operations are rejected without a source")
def test_rejected_without_source():
    for call in IN_PLACE_CALLS.values():
        assert_raises(UnsupportedForSequenceSource, lambda: call(ArrayIteration()))


@test("in-place operations need a writable array-like")
def test_read_only_source():
    adapter = A(Frozen())
    assert_equal(adapter.to.list(), [1, 2], "reading still works")
    for call in IN_PLACE_CALLS.values():
        assert_raises(ReadOnlySource, lambda: call(adapter))


# sort() / reverse() tests

@test("sort orders a mapping source in place")
def test_sort_mapping():
    adapter = of(3, 1, 2)
    result = adapter.sort()
    assert_that(result is adapter, "sort returns the adapter")
    assert_equal(adapter.to.list(), [1, 2, 3])
    assert_equal(adapter.source.target, {0: 1, 1: 2, 2: 3, 'length': 3})


@test("sort supports key and reverse")
def test_sort_key_reverse():
    words = of('bb', 'a', 'ccc')
    assert_equal(words.sort(key=len, reverse=True).to.list(), ['ccc', 'bb', 'a'])


@test("sort moves holes to the end")
def test_sort_holes():
    adapter = from_array_like({0: 3, 2: 1}, length=4)
    adapter.sort()
    assert_equal(snapshot(adapter), [(0, 1), (1, 3), (2, None), (3, None)])
    assert_that(2 not in adapter.source.target, "holes stay absent")


@test("a failing sort leaves the source untouched")
def test_sort_failure_atomic():
    adapter = of(2, 'a', 1)
    assert_raises(TypeError, lambda: adapter.sort())
    assert_equal(adapter.to.list(), [2, 'a', 1])
    assert_raises(InvalidCallback, lambda: adapter.sort(key='len'))
    assert_equal(adapter.to.list(), [2, 'a', 1])


@test("reverse flips positions including holes")
def test_reverse():
    adapter = from_array_like({0: 'a', 2: 'c'}, length=4)
    adapter.reverse()
    assert_equal(snapshot(adapter), [(0, None), (1, 'c'), (2, None), (3, 'a')])


@test("in-place operations keep text keys of json-style mappings")
def test_string_key_write_back():
    target = {"0": "b", "1": "a", "length": 2}
    A(target).sort()
    assert_equal(target, {"0": "a", "1": "b", "length": 2})
    A(target).pop()
    assert_equal(target, {"0": "a", "length": 1})


# fill() / copy_within() tests

@test("fill overwrites a range")
def test_fill():
    assert_equal(of(1, 2, 3, 4).fill(0, 1, 3).to.list(), [1, 0, 0, 4])
    assert_equal(of(1, 2, 3).fill(9).to.list(), [9, 9, 9])
    assert_equal(of(1, 2, 3).fill(9, -1).to.list(), [1, 2, 9])
    assert_equal(of(1, 2, 3).fill(9, 2, 1).to.list(), [1, 2, 3], "empty range is a no-op")


@test("fill fills holes too")
def test_fill_holes():
    adapter = A({'length': 2})
    adapter.fill('x')
    assert_equal(adapter.source.target, {0: 'x', 1: 'x', 'length': 2})


@test("copy_within copies a range over another")
def test_copy_within():
    assert_equal(of(1, 2, 3, 4, 5).copy_within(0, 3).to.list(), [4, 5, 3, 4, 5])
    assert_equal(of(1, 2, 3, 4, 5).copy_within(1, 0, 2).to.list(), [1, 1, 2, 4, 5])
    assert_equal(of(1, 2, 3, 4, 5).copy_within(-2, 0).to.list(), [1, 2, 3, 1, 2])


# push() / pop() / shift() / unshift() tests

@test("push appends and returns the new length")
def test_push():
    adapter = of(1)
    assert_equal(adapter.push(2, 3), 3)
    assert_equal(adapter.to.list(), [1, 2, 3])
    assert_equal(adapter.length, 3)


@test("pop removes the last element")
def test_pop():
    adapter = of(1, 2)
    assert_equal(adapter.pop(), 2)
    assert_equal(adapter.source.target, {0: 1, 'length': 1})
    assert_equal(adapter.pop(), 1)
    assert_that(adapter.pop() is None, "empty pop returns None")
    assert_equal(adapter.length, 0)


@test("shift and unshift work at the front")
def test_shift_unshift():
    adapter = of('b', 'c')
    assert_equal(adapter.unshift('a'), 3)
    assert_equal(adapter.to.list(), ['a', 'b', 'c'])
    assert_equal(adapter.shift(), 'a')
    assert_equal(adapter.to.list(), ['b', 'c'])


# splice() tests

@test("splice removes and inserts")
def test_splice():
    adapter = of(1, 2, 3, 4)
    removed = adapter.splice(1, 2, 'a', 'b', 'c')
    assert_equal(removed, [2, 3])
    assert_equal(adapter.to.list(), [1, 'a', 'b', 'c', 4])
    assert_equal(adapter.length, 5)


@test("splice without a count removes the rest")
def test_splice_rest():
    adapter = of(1, 2, 3, 4)
    assert_equal(adapter.splice(-3), [2, 3, 4])
    assert_equal(adapter.to.list(), [1])
    assert_equal(adapter.splice(0, -5), [], "negative counts remove nothing")


# write-back targets

@test("objects with a length attribute are written position by position")
def test_write_back_positions():
    target = Positions({0: 'b', 1: 'a', 3: 'c'}, 4)
    adapter = A(target)
    adapter.sort()
    assert_equal(target.positions, {0: 'a', 1: 'b', 2: 'c'})
    assert_equal(target.length, 4)
    adapter.pop()
    assert_equal(target.length, 3)


@test("length-less indexables are written through slice assignment")
def test_write_back_legacy():
    target = Legacy([3, 1, 2])
    adapter = A(target)
    adapter.sort()
    assert_equal(target.items, [1, 2, 3])
    adapter.push(4)
    assert_equal(target.items, [1, 2, 3, 4])


if __name__ == "__main__":
    suite.main(title="arrayiter in-place operations test suite")

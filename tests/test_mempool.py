import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ptools.mempool import HandleMemory, ObjectMemPool, PoolErr, PoolError


def make_pool(blocks=8, objects=8, size=16):
    return ObjectMemPool(size, blocks, objects)


@pytest.mark.parametrize("size,blocks", [(0, 4), (12, 4), (16, 0), (-8, 4)])
def test_invalid_geometry_raises(size, blocks):
    with pytest.raises(PoolError) as info:
        ObjectMemPool(size, blocks, 4)
    assert info.value.code is PoolErr.BLOCK_SIZE
    assert info.value.is_memory()


def test_fresh_pool_state():
    pool = make_pool()
    assert pool.total_memsize() == pool.block_size * pool.max_blocks
    assert pool.count_mem_used() == 0
    assert pool.max_blocks_free() == pool.max_blocks
    assert pool.error_as_string() == "ERR_NO_ERROR"
    assert not pool.is_error_state()


def test_allocations_are_consecutive():
    pool = make_pool()
    first = pool.blocks_alloc(1)
    second = pool.blocks_alloc(2)
    third = pool.alloc(1)
    assert first == 0
    assert second == pool.block_size
    assert third == pool.block_size * 3
    assert pool.count_mem_used() == pool.block_size * 4


def test_alloc_rounds_up_to_blocks():
    pool = make_pool()
    pool.alloc(pool.block_size + 1)
    assert pool.handles[0].count_blocks == 2


def test_free_reuses_gap():
    pool = make_pool()
    a = pool.blocks_alloc(1)
    pool.blocks_alloc(1)
    pool.free_object(a)
    assert pool.blocks_alloc(1) == a
    assert [h.address for h in pool.handles] == sorted(h.address for h in pool.handles)


def test_free_unknown_address_sets_error():
    pool = make_pool()
    with pytest.raises(PoolError) as info:
        pool.free_object(pool.block_size * 5)
    assert info.value.code is PoolErr.INVALID_BLOCK
    assert pool.error_as_string() == "ERR_INVALID_BLOCK"


def test_free_none_raises():
    pool = make_pool()
    with pytest.raises(PoolError):
        pool.free_object(None)
    assert pool.last_error is PoolErr.INVALID_BLOCK


def test_invalid_block_count():
    pool = make_pool()
    with pytest.raises(PoolError) as info:
        pool.blocks_alloc(0)
    assert info.value.code is PoolErr.INVALID_BLOCK_COUNT


def test_too_many_blocks_requested():
    pool = make_pool()
    with pytest.raises(PoolError) as info:
        pool.blocks_alloc(pool.max_blocks + 1)
    assert info.value.code is PoolErr.INVALID_BLOCK_COUNT


def test_no_consecutive_blocks_and_sticky_error():
    pool = make_pool(blocks=4)
    pool.blocks_alloc(3)
    with pytest.raises(PoolError) as info:
        pool.blocks_alloc(2)
    assert info.value.code is PoolErr.NO_CONSECUTIVE_BLOCKS
    with pytest.raises(PoolError):
        pool.blocks_alloc(1)
    pool.clear_error()
    assert pool.blocks_alloc(1) == pool.block_size * 3


def test_handle_capacity():
    pool = make_pool(blocks=8, objects=2)
    pool.blocks_alloc(1)
    pool.blocks_alloc(1)
    with pytest.raises(PoolError) as info:
        pool.blocks_alloc(1)
    assert info.value.code is PoolErr.HANDLE_FULL
    assert len(pool) == 2


def test_clear_resets_everything():
    pool = make_pool()
    pool.blocks_alloc(2)
    with pytest.raises(PoolError):
        pool.free_object(None)
    pool.clear()
    assert len(pool) == 0
    assert not pool.is_error_state()
    assert pool.max_mem_free() == pool.total_memsize()


def test_show_blocks_prints_map(capsys):
    pool = make_pool(blocks=4)
    pool.blocks_alloc(1)
    longest = pool.show_blocks()
    out = capsys.readouterr().out
    assert out.startswith("X...<<<")
    assert longest == pool.max_blocks_free()


def test_show_info_lists_handles(capsys):
    pool = make_pool()
    pool.blocks_alloc(2)
    pool.show_info(0, True)
    out = capsys.readouterr().out
    assert "Array, count:1" in out
    assert "[0]=HandleMemory:2 blocks, start at:0x" in out


def test_show_info_reports_error(capsys):
    pool = make_pool()
    with pytest.raises(PoolError):
        pool.blocks_alloc(0)
    pool.show_info()
    assert "<<<ERR_INVALID_BLOCK_COUNT>>>" in capsys.readouterr().out


def test_handle_is_ok():
    assert HandleMemory(0, 1).is_ok()
    assert not HandleMemory(None, 1).is_ok()
    assert not HandleMemory(8, 0).is_ok()


@settings(max_examples=50, deadline=None)
@given(st.lists(st.tuples(st.booleans(), st.integers(min_value=1, max_value=3)), max_size=30))
def test_random_alloc_free_keeps_accounting(ops):
    pool = make_pool(blocks=16, objects=16)
    live = {}
    for do_alloc, n in ops:
        if do_alloc or not live:
            try:
                live[pool.blocks_alloc(n)] = n
            except PoolError:
                pool.clear_error()
        else:
            address = next(iter(live))
            pool.free_object(address)
            del live[address]
        assert pool.count_mem_used() == sum(live.values()) * pool.block_size
        used = sum(live.values())
        assert pool.max_blocks_free() <= pool.max_blocks - used
        spans = sorted((a // pool.block_size, a // pool.block_size + c) for a, c in live.items())
        for (_, end), (start, _) in zip(spans, spans[1:]):
            assert end <= start
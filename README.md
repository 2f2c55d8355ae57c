# ptools

A small library of building blocks for low-level and protocol code. It has
no dependencies outside the standard library.

## Modules

- `ptools.textfmt`: C-style string helpers (`string_compare`,
  `string_compare_n`, `string_find`, `string_find_backwards`,
  `string_insert`, `string_remove_chars`, ...), byte-block comparison
  (`mem_compare`, `pmem_cmp`, `pmem_cmp_ignore_case`), number formatting
  (`number_to_ascii`, `number_to_hex_ascii`, `float_to_ascii`, `get_hex`,
  `get_hex_trimmed`, `get_hex_string`) and lenient number parsing with
  `ascii_to_number(text, int | float, length)`.
- `ptools.bits`: `Bits`, a dataclass holding an integer of flags with
  `set_flag`, `toggle_flag`, `clear_bits`, `set_bit_number` and friends.
- `ptools.addresses`: `mac_to_int`, `mac6_to_int` and `int_to_mac` for
  48-bit MAC values, `format_ip` and `format_ip_bytes` for dotted IPv4
  text, and `first_line` to cut text at the first CR or LF.
- `ptools.util`: `version()`, `is_flag()` (accepts `true`, `1`, `ON`, `on`,
  `TRUE`, `True`), `rand_seed_by_milliseconds()` and `rand_next_int()`.
- `ptools.ptime`: `get_milliseconds()` (a monotonic clock since import,
  wrapped to 32 bits), `get_time()` returning a `PTime` with hours, minutes,
  seconds and milliseconds, `sleep_milliseconds()` and `get_thread_id()`.
- `ptools.result`: `ToolsError`, an exception with a numeric code and an
  `ErrClass` (`GENERAL`, `UART`, `MEMORY`, `SOCKET`).
- `ptools.fixedstring`: `FixedString`, text with a hard capacity and a
  write cursor.
- `ptools.mempool`: `ObjectMemPool`, a bookkeeping allocator that hands out
  runs of fixed-size blocks as byte offsets. Failures raise `PoolError`
  (a `ToolsError`) carrying a `PoolErr` code, and leave the pool in an error
  state until `clear_error()` or `clear()`.
- `ptools.fixed_array`: `FixedArray`, a bounded sequence with
  `push_back`, `insert_at`, `delete_at`, `find`, `find_specific`, `sort`
  and `show`. It raises `OverflowError` when full.
- `ptools.fixed_map`: `FixedMap`, a bounded insertion-ordered map. `insert`
  raises `OverflowError` when full and `KeyError` for a key already present.
- `ptools.pool_array`: `PoolArray`, a growable array whose capacity is
  reserved from an `ObjectMemPool`. It grows to `capacity * 2 + 1` and can be
  used as a context manager that releases its storage on exit.
- `ptools.httpreq`: `create_request()` parses a request line into a
  `Request` (`Method`, `HttpVersion`, target). `create_header()` parses a
  request head into an `HttpHeader` holding the request and its fields.
- `ptools.json_scanner`: `Scanner` walks JSON text and reports events to a
  `Handler`. The base `Handler` records events in `handler.events`. Invalid
  input raises `JsonScanError` with the position.
- `ptools.json_node`: `parse()` builds a `Node` tree through `NodeBuilder`.
  Nodes support `query()` paths such as `.items[2].name`, building with
  `add`, `add_string`, `add_bool`, `create_object`, `create_array` and
  `add_to_array`, plus `count_nodes`, `show` and `to_json_string`.

## Installation

    pip install .

## Examples

Parse JSON and query it:

    from ptools.json_node import parse

    root = parse('{"leds": [{"on": true}, {"on": false}]}')
    node = root.query(".leds[1].on")
    print(node.type_as_string())   # Boolean
    print(node.bool_value)         # False

Parse an HTTP request head:

    from ptools.httpreq import create_header

    hdr = create_header(b"GET /api/led HTTP/1.1\r\nHost: example.com\r\n\r\n")
    print(hdr.request.is_get(), hdr.request.request_target, hdr.get("Host"))
    # True /api/led example.com

Use the memory pool:

    from ptools.mempool import ObjectMemPool

    pool = ObjectMemPool(block_size=32, max_blocks=16, max_objects=8)
    address = pool.alloc(40)          # takes two blocks
    print(pool.count_mem_used())      # 64
    pool.free_object(address)

## What it does not do

- `ObjectMemPool` only keeps track of which blocks are in use. It holds no
  bytes, and its addresses are offsets, not memory.
- The JSON scanner passes strings on raw and does not decode escape
  sequences. It reads numbers only as an optional minus, digits and an
  optional fraction, without exponents. `Node.to_json_string()` produces
  indented text for display and writes a null value as `null-type`, so its
  output is not strict JSON.
- `ptools.httpreq` parses request heads only. It does not read bodies, send
  responses or open sockets.
- There is no command-line program and no serial or UART output.
  The `show` methods print to standard output.

## Running the tests

    pip install .[test]
    pytest
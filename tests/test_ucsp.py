import pytest

from shaderpak.compression import compress
from shaderpak.errors import FormatError, UnsupportedFeatureError
from shaderpak.formats import UCSPak
from shaderpak.models import LutEntry, ShaderPak
from shaderpak.varint import encode_varint


@pytest.fixture
def abc_pak():
    pak = ShaderPak()
    pak.add("A", b"\x01\x02\x03\x04")
    pak.add("B", b"")
    pak.add("C", bytes(i % 251 for i in range(10_000)))
    return pak


@pytest.fixture
def abc_file(tmp_path, abc_pak):
    path = tmp_path / "abc.ucsp"
    UCSPak().save(path, abc_pak)
    return path


def lut_size(table):
    size = 0
    for entry in table:
        name = entry.name.encode()
        size += len(encode_varint(len(name))) + len(name)
        size += len(encode_varint(entry.offset)) + len(encode_varint(entry.length))
    return size


def build(version=1, compression=1, entries=(), data=b""):
    """Hand-assemble a UCSP file from (name, offset, length) triples."""
    out = bytearray(b"UCSP")
    out += bytes([version, compression])
    out += encode_varint(len(entries))
    for name, offset, length in entries:
        raw = name.encode()
        out += encode_varint(len(raw)) + raw
        out += encode_varint(offset) + encode_varint(length)
    return bytes(out + data)


class TestLayout:
    def test_header(self, abc_file):
        assert abc_file.read_bytes()[:7] == b"UCSP\x01\x01\x03"

    def test_empty(self, tmp_path):
        path = tmp_path / "empty.ucsp"
        UCSPak().save(path, ShaderPak())
        assert path.read_bytes() == b"UCSP\x01\x01\x00"

    def test_offsets(self, abc_file, abc_pak):
        table = UCSPak().read_table(abc_file)
        a, b, c = (compress(abc_pak.try_get(name)) for name in "ABC")
        assert table == [
            LutEntry(name="A", offset=0, length=len(a)),
            LutEntry(name="B", offset=len(a), length=len(b)),
            LutEntry(name="C", offset=len(a) + len(b), length=len(c)),
        ]

    def test_offsets_address_the_data_block(self, abc_file, abc_pak):
        raw = abc_file.read_bytes()
        table = UCSPak().read_table(abc_file)
        data_start = 7 + lut_size(table)
        assert len(raw) == data_start + table[-1].end
        for entry in table:
            chunk = raw[data_start + entry.offset : data_start + entry.end]
            assert chunk == compress(abc_pak.try_get(entry.name))

    def test_offsets_are_monotonic(self, tmp_path):
        pak = ShaderPak({f"shader_{i}": bytes([i]) * i for i in range(50)})
        path = tmp_path / "many.ucsp"
        UCSPak().save(path, pak)
        table = UCSPak().read_table(path)
        assert [entry.name for entry in table] == pak.names
        for previous, entry in zip(table, table[1:]):
            assert entry.offset == previous.end


class TestTamper:
    def test_magic(self, abc_file):
        data = bytearray(abc_file.read_bytes())
        data[0:4] = b"PSCU"
        abc_file.write_bytes(bytes(data))
        with pytest.raises(FormatError, match="not a valid indexed package"):
            UCSPak().load(abc_file)

    def test_version(self, abc_file):
        data = bytearray(abc_file.read_bytes())
        data[4] = 2
        abc_file.write_bytes(bytes(data))
        with pytest.raises(UnsupportedFeatureError, match="version 2") as excinfo:
            UCSPak().load(abc_file)
        assert excinfo.value.value == 2
        assert not isinstance(excinfo.value, FormatError)

    def test_compression(self, abc_file):
        data = bytearray(abc_file.read_bytes())
        data[5] = 7
        abc_file.write_bytes(bytes(data))
        with pytest.raises(UnsupportedFeatureError, match="Compression type 7") as excinfo:
            UCSPak().load(abc_file)
        assert excinfo.value.value == 7
        assert not isinstance(excinfo.value, FormatError)

    @pytest.mark.parametrize("data", [b"", b"UC", b"UCSP", b"UCSP\x01"])
    def test_short_header(self, tmp_path, data):
        path = tmp_path / "short.ucsp"
        path.write_bytes(data)
        with pytest.raises(FormatError):
            UCSPak().load(path)

    def test_truncated_table(self, tmp_path):
        path = tmp_path / "broken.ucsp"
        path.write_bytes(build(entries=[("A", 0, 0)])[:-1])
        with pytest.raises(FormatError):
            UCSPak().load(path)

    def test_entry_outside_data_block(self, tmp_path):
        payload = compress(b"1")
        path = tmp_path / "broken.ucsp"
        path.write_bytes(build(entries=[("A", 1, len(payload))], data=payload))
        with pytest.raises(FormatError, match="exceeds the data block"):
            UCSPak().load(path)
        with pytest.raises(FormatError, match="exceeds the data block"):
            UCSPak().read_table(path)

    def test_corrupt_payload(self, abc_file):
        data = bytearray(abc_file.read_bytes())
        data[-1] ^= 0xFF
        abc_file.write_bytes(bytes(data))
        with pytest.raises(FormatError, match="corrupt compressed block"):
            UCSPak().load(abc_file)


class TestRandomAccess:
    def test_load_shader(self, abc_file, abc_pak):
        for name in "ABC":
            assert UCSPak().load_shader(abc_file, name) == abc_pak.try_get(name)

    def test_missing_shader(self, abc_file):
        assert UCSPak().load_shader(abc_file, "D") is None

    def test_other_payloads_untouched(self, abc_file):
        table = UCSPak().read_table(abc_file)
        data = bytearray(abc_file.read_bytes())
        # wipe C's payload; A must still be readable on its own
        c = table[2]
        start = len(data) - table[-1].end + c.offset
        data[start : start + c.length] = b"\x00" * c.length
        abc_file.write_bytes(bytes(data))

        assert UCSPak().load_shader(abc_file, "A") == b"\x01\x02\x03\x04"
        with pytest.raises(FormatError):
            UCSPak().load(abc_file)

    def test_duplicate_names_last_wins(self, tmp_path):
        first, second = compress(b"first"), compress(b"second")
        path = tmp_path / "dup.ucsp"
        path.write_bytes(
            build(
                entries=[("A", 0, len(first)), ("A", len(first), len(second))],
                data=first + second,
            )
        )
        assert UCSPak().load(path).try_get("A") == b"second"
        assert UCSPak().load_shader(path, "A") == b"second"

    def test_shared_payload(self, tmp_path):
        payload = compress(b"shared")
        path = tmp_path / "shared.ucsp"
        path.write_bytes(
            build(entries=[("A", 0, len(payload)), ("B", 0, len(payload))], data=payload)
        )
        loaded = UCSPak().load(path)
        assert loaded.try_get("A") == loaded.try_get("B") == b"shared"

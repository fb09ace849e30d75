from protobom.storage.base import StoreOptions
from protobom.writer.options import RenderOptions, SerializeOptions, WriterOptions


class _Driver:
    pass


class _OtherDriver:
    pass


def test_string_key_round_trip():
    options = WriterOptions()
    custom = {"test_property": "test"}
    options.set_format_options("spdx", custom)
    assert options.get_format_options("spdx") is custom


def test_missing_key_returns_none():
    assert WriterOptions().get_format_options("unknown") is None


def test_object_key_uses_its_type():
    options = WriterOptions()
    custom = {"indent": 2}
    options.set_format_options(_Driver(), custom)
    assert options.get_format_options(_Driver()) is custom
    assert options.get_format_options(_OtherDriver()) is None


def test_empty_key_is_ignored():
    options = WriterOptions()
    options.set_format_options("", {"a": 1})
    assert options.get_format_options("") is None


def test_setting_again_replaces():
    options = WriterOptions()
    options.set_format_options("key", "first")
    options.set_format_options("key", "second")
    assert options.get_format_options("key") == "second"


def test_format_options_are_per_instance():
    first = WriterOptions()
    second = WriterOptions()
    first.set_format_options("key", "value")
    assert second.get_format_options("key") is None


def test_fields_hold_given_values():
    ro = RenderOptions(indent=2)
    so = SerializeOptions()
    st = StoreOptions(no_clobber=True)
    options = WriterOptions(
        format="fmt", render_options=ro, serialize_options=so, store_options=st
    )
    assert options.format == "fmt"
    assert options.render_options is ro
    assert options.serialize_options is so
    assert options.store_options is st
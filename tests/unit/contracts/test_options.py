import pytest
from pydantic import ValidationError

from webmutate.contracts.enums import FormatFlag, WebMethod
from webmutate.contracts.errors import ConfigurationError
from webmutate.contracts.options import MutationOptions


class TestMutationOptions:

    def test_defaults(self):
        opts = MutationOptions()
        assert opts.format == (
            FormatFlag.STRAIGHT,
            FormatFlag.APPEND,
            FormatFlag.NULL,
            FormatFlag.APPEND | FormatFlag.NULL,
        )
        assert opts.param_flip is False
        assert opts.respect_method is None
        assert opts.skip == ()
        assert opts.skip_original is False

    def test_coerce_none_and_instances(self):
        opts = MutationOptions(param_flip=True)
        assert MutationOptions.coerce(opts) is opts
        assert MutationOptions.coerce(None) == MutationOptions()

    def test_coerce_mapping(self):
        opts = MutationOptions.coerce({"format": [3, FormatFlag.NULL], "respect_method": False})
        assert opts.format == (FormatFlag.STRAIGHT | FormatFlag.APPEND, FormatFlag.NULL)
        assert all(isinstance(f, FormatFlag) for f in opts.format)
        assert opts.respect_method is False

    def test_reserved_fields_are_kept_verbatim(self):
        opts = MutationOptions.coerce({"skip": ["csrf"], "skip_original": True})
        assert opts.skip == ("csrf",)
        assert opts.skip_original is True

    def test_invalid_mapping_raises_configuration_error(self):
        with pytest.raises(ConfigurationError, match="Invalid mutation options"):
            MutationOptions.coerce({"format": [FormatFlag.all_bits() + 1]})

    def test_non_mapping_raises_configuration_error(self):
        with pytest.raises(ConfigurationError):
            MutationOptions.coerce(42)

    @pytest.mark.parametrize("kwargs", [
        {"format": []},
        {"format": [1 << 6]},
        {"respect_method": "sometimes"},
        {"unknown": 1},
    ])
    def test_direct_construction_raises_configuration_error(self, kwargs):
        with pytest.raises(ConfigurationError, match="Invalid mutation options"):
            MutationOptions(**kwargs)

    def test_options_are_frozen(self):
        opts = MutationOptions()
        with pytest.raises(ValidationError):
            opts.param_flip = True
        with pytest.raises(ValidationError):
            opts.format = ()

    def test_format_cannot_be_changed_in_place(self):
        opts = MutationOptions(format=[FormatFlag.STRAIGHT])

        assert isinstance(opts.format, tuple)
        with pytest.raises(AttributeError):
            opts.format.clear()
        with pytest.raises(AttributeError):
            opts.format.append(1 << 6)
        assert opts.format == (FormatFlag.STRAIGHT,)

    def test_reserved_skip_list_is_immutable(self):
        opts = MutationOptions(skip=["csrf"])

        with pytest.raises(AttributeError):
            opts.skip.append("token")


def test_all_bits():
    assert FormatFlag.all_bits() == 0b1111


def test_web_method_parse():
    assert WebMethod.parse("post") is WebMethod.POST
    assert WebMethod.parse(" Get ") is WebMethod.GET
    assert WebMethod.parse(WebMethod.POST) is WebMethod.POST
    with pytest.raises(ValueError):
        WebMethod.parse("TRACE")


def test_web_method_covers_common_verbs():
    assert WebMethod.parse("put") is WebMethod.PUT
    assert {m.value for m in WebMethod} == {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"}

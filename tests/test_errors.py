from coherentnoise.errors import InvalidParamError, NoiseError, NoModuleError


def test_invalid_param_is_noise_error():
    err = InvalidParamError("bad octave count")
    assert isinstance(err, NoiseError)
    assert str(err) == "bad octave count"


def test_invalid_param_is_value_error():
    err = InvalidParamError("bad")
    assert isinstance(err, ValueError)
    assert err.args == ("bad",)


def test_no_module_is_noise_error_and_lookup_error():
    err = NoModuleError("source 0 missing")
    assert isinstance(err, NoiseError)
    assert isinstance(err, LookupError)
    assert str(err) == "source 0 missing"


def test_errors_are_distinct():
    missing = NoModuleError("missing")
    invalid = InvalidParamError("invalid")
    assert not isinstance(missing, InvalidParamError)
    assert not isinstance(invalid, NoModuleError)
    assert str(missing) == "missing"
    assert str(invalid) == "invalid"
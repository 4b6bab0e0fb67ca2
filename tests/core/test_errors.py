from fxform.core.errors import (
    ConversionError,
    ParseError,
    UnsupportedCurrencyError,
    error_message,
)


class TestErrorMessages:
    """Tests for mapping conversion failures to result text."""

    def test_parse_error(self, settings):
        exc = ParseError("abc")

        assert exc.code == "invalid_amount"
        assert exc.text == "abc"
        assert error_message(exc, settings) == "Valor inválido."

    def test_unsupported_currency(self, settings):
        exc = UnsupportedCurrencyError("XXX", "YYY")

        assert exc.code == "unsupported_currency"
        assert exc.codes == ("XXX", "YYY")
        assert "XXX, YYY" in str(exc)
        assert error_message(exc, settings) == "Moeda não suportada."

    def test_custom_messages(self, settings):
        custom = settings.model_copy(
            update={"invalid_amount_message": "Invalid amount."}
        )

        assert error_message(ParseError(""), custom) == "Invalid amount."

    def test_unmapped_error_falls_back_to_placeholder(self, settings, caplog):
        assert error_message(ConversionError("boom"), settings) == settings.placeholder
        assert "no message mapped" in caplog.text

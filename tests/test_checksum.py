import allure
import pytest

from common.checksum import (
    credit_code_check_char,
    credit_code_parity,
    identity_check_char,
    validate_credit_code,
    validate_identity_code,
)
from common.code_tables import CREDIT_CODE_CHARS
from common.exceptions import InvalidArgumentError
from utils.loader import YamlLoader

yaml_data = YamlLoader()


@allure.feature("信用代码校验位")
class TestCreditCodeChecksum:

    def test_known_prefix(self):
        parity = credit_code_parity("91110108MA01ABCDE")
        assert parity == 22
        assert CREDIT_CODE_CHARS[parity] == "N"
        assert credit_code_check_char("91110108MA01ABCDE") == "N"

    def test_zero_sum_maps_to_zero(self):
        # 31 - 0 % 31 == 31，需要折回 0
        assert credit_code_parity("0" * 17) == 0

    def test_only_first_17_chars_are_used(self):
        assert credit_code_parity("91110108MA01ABCDEN") == credit_code_parity("91110108MA01ABCDE")

    @pytest.mark.parametrize("prefix", [
        "91110108MA01ABCDI",
        "91110108MA01ABCDO",
        "91110108ma01abcde",
        "9111010",
        ""
    ])
    def test_illegal_prefix_returns_sentinel(self, prefix):
        assert credit_code_parity(prefix) == -1

    def test_check_char_rejects_illegal_prefix(self):
        with pytest.raises(InvalidArgumentError):
            credit_code_check_char("91110108MA01ABCDZ")

    @pytest.mark.parametrize("code", yaml_data.get_data("valid_credit_codes"))
    def test_validate_valid(self, code):
        assert validate_credit_code(code)

    @pytest.mark.parametrize("code", yaml_data.get_data("invalid_credit_codes"))
    def test_validate_invalid(self, code):
        assert not validate_credit_code(code)

    def test_validate_rejects_non_string(self):
        assert not validate_credit_code(None)


@allure.feature("身份证校验码")
class TestIdentityChecksum:

    def test_known_identity(self):
        assert identity_check_char("11010519491231002") == "X"

    def test_remainder_lookup(self):
        # 加权和为 50，50 % 11 == 6，对应校验码 '6'
        assert identity_check_char("11010119000101000") == "6"

    @pytest.mark.parametrize("prefix", ["1101051949123100", "110105194912310021", "1101051949123100A", ""])
    def test_bad_prefix(self, prefix):
        with pytest.raises(InvalidArgumentError):
            identity_check_char(prefix)

    @pytest.mark.parametrize("code", yaml_data.get_data("valid_identity_codes"))
    def test_validate_valid(self, code):
        assert validate_identity_code(code)

    @pytest.mark.parametrize("code", yaml_data.get_data("invalid_identity_codes"))
    def test_validate_invalid(self, code):
        assert not validate_identity_code(code)

    def test_validate_fifteen_digits_only(self):
        assert not validate_identity_code("11010100010100X")

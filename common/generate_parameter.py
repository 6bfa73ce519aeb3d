import logging
import random
import string

from common import code_tables as tables
from common.checksum import credit_code_parity, identity_check_char
from common.exceptions import InvalidArgumentError


class Generate:
    """
    随机测试数据生成器

    每个方法都可以传入 rng（如 random.Random(seed)）来固定随机结果，
    不传时使用全局 random 模块。
    """

    @staticmethod
    def generate_credit_code(rng=None) -> str:
        """生成一个符合校验规则的18位统一社会信用代码"""
        rng = rng or random
        chars = tables.CREDIT_CODE_CHARS
        prefix = "".join(rng.choice(chars) for _ in range(2))  # 第1~2位
        prefix += "".join(rng.choice(tables.DIGITS) for _ in range(6))  # 第3~8位只能是数字
        prefix += "".join(rng.choice(chars) for _ in range(9))  # 第9~17位

        parity = credit_code_parity(prefix)
        if parity == -1:
            raise RuntimeError(f"生成的信用代码前缀包含非法字符：{prefix}")
        credit_code = prefix + chars[parity]
        logging.debug(f"生成统一社会信用代码：{credit_code}")
        return credit_code

    @staticmethod
    def generate_identity_code(length=18, rng=None, area_code=None) -> str:
        """
        生成一个身份证号

        参数:
            length: 15 或 18，其它长度抛出 InvalidArgumentError
            area_code: 6位行政区划代码，默认 110101（示例值，并非真实分配）
        """
        if length not in (15, 18):
            logging.error(f"不支持的身份证长度：{length}")
            raise InvalidArgumentError("身份证长度只能是 15 或 18")
        if area_code is None:
            area_code = tables.DEFAULT_AREA_CODE
        if len(area_code) != 6 or any(char not in tables.DIGITS for char in area_code):
            logging.error(f"行政区划代码格式错误：{area_code}")
            raise InvalidArgumentError(f"行政区划代码必须是6位数字：{area_code}")
        rng = rng or random

        year = rng.randint(*tables.BIRTH_YEAR_RANGE)
        month = f"{rng.randint(1, 12):02d}"
        day = f"{rng.randint(1, 28):02d}"  # 只取1~28日，避开大小月和闰年
        if length == 15:
            birth = f"{year % 100:02d}{month}{day}"
        else:
            birth = f"{year}{month}{day}"

        order_code = f"{rng.randrange(999):03d}"  # 0~998
        identity_code = area_code + birth + order_code
        if length == 18:
            identity_code += identity_check_char(identity_code)
        logging.debug(f"生成{length}位身份证号：{identity_code}")
        return identity_code

    @staticmethod
    def generate_chinese_name(allow_double_surname=False, rng=None) -> str:
        rng = rng or random
        if allow_double_surname and rng.random() < 0.15:
            surname = rng.choice(tables.DOUBLE_SURNAMES)
        else:
            surname = rng.choice(tables.SURNAMES)

        name_length = 1 if rng.random() < 0.5 else 2
        given_name = "".join(rng.choice(tables.GIVEN_NAME_CHARS) for _ in range(name_length))
        return surname + given_name

    @staticmethod
    def generate_random_address(detailed=False, rng=None) -> str:
        """detailed=True 时带上省份和城市"""
        rng = rng or random
        province = rng.choice(tables.PROVINCES)
        city = rng.choice(tables.CITIES.get(province, tables.UNKNOWN_CITIES))
        district = rng.choice(tables.DISTRICTS.get(city, tables.DEFAULT_DISTRICTS))
        street = rng.choice(tables.STREETS)
        number = rng.randint(1, 1000)
        suffix = rng.choice(tables.HOUSE_NUMBER_SUFFIXES)

        address = f"{district}{street}{number}{suffix}"
        if detailed:
            return f"{province}{city}{address}"
        return address

    @staticmethod
    def generate_random_company_name(allow_complex=False, rng=None) -> str:
        """allow_complex=True 时允许“集团”“控股”等后缀"""
        rng = rng or random
        suffixes = tables.COMPANY_SUFFIXES
        if allow_complex:
            suffixes = suffixes + tables.COMPLEX_COMPANY_SUFFIXES

        location = rng.choice(tables.COMPANY_LOCATIONS)
        words = []
        for _ in range(rng.randint(1, 2)):
            pool = tables.COMPANY_INDUSTRIES if rng.random() > 0.5 else tables.COMPANY_MODIFIERS
            words.append(rng.choice(pool))
        return location + "".join(words) + rng.choice(suffixes)

    @staticmethod
    def generate_random_phone_number(rng=None) -> str:
        rng = rng or random
        prefix = rng.choice(tables.PHONE_PREFIXES)
        suffix = "".join(rng.choice(string.digits) for _ in range(8))
        return f"{prefix}{suffix}"

    @staticmethod
    def generate_random_email(rng=None) -> str:
        """格式：4位小写字母 + 4位数字 @ 2位小写字母 .com"""
        rng = rng or random
        letters = string.ascii_lowercase
        username = "".join(rng.choice(letters) for _ in range(4))
        username += "".join(rng.choice(string.digits) for _ in range(4))
        domain = "".join(rng.choice(letters) for _ in range(2))
        return f"{username}@{domain}.com"


if __name__ == "__main__":
    print(Generate.generate_credit_code())
    print(Generate.generate_identity_code(18))
    print(Generate.generate_identity_code(15))
    print(Generate.generate_chinese_name(allow_double_surname=True))
    print(Generate.generate_random_address())
    print(Generate.generate_random_company_name(allow_complex=True))
    print(Generate.generate_random_phone_number())
    print(Generate.generate_random_email())

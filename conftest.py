import random

import pytest

from utils.loader import YamlLoader


class LowestRandom:
    """每次都返回最小值的随机源，用来断言固定的生成结果"""

    def random(self):
        return 0.0

    def randint(self, a, b):
        return a

    def randrange(self, start, stop=None, step=1):
        return 0 if stop is None else start

    def choice(self, seq):
        return seq[0]


@pytest.fixture(scope="session")
def yaml_data():
    return YamlLoader()


@pytest.fixture(scope="session")
def seed(request, yaml_data):
    option = request.config.getoption("--seed")
    if option is not None:
        return option
    return yaml_data.get_section("generator").get("seed", 0)


@pytest.fixture(scope="function")  #函数级别，每个用例拿到全新的随机源
def rng(seed):
    return random.Random(seed)


@pytest.fixture(scope="function")
def lowest_rng():
    return LowestRandom()


def pytest_addoption(parser):
    parser.addoption(
        "--seed",
        action="store",
        type=int,
        default=None,
        help="固定随机种子，默认读取 config.yaml 中的 generator.seed"
    )

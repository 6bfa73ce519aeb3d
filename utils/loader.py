import os
import yaml

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_PATH = os.path.join(BASE_DIR, "config", "config.yaml")


class YamlLoader():
    def __init__(self, config_path=CONFIG_PATH):
        self.config_path = config_path

    @staticmethod
    def load_yaml(file_path):
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"配置文件不存在：{file_path}")
        with open(file_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def get_config(self):
        return self.load_yaml(self.config_path)

    def get_section(self, section_name):
        """读取配置中的一个分组，不存在时返回空字典"""
        return self.get_config().get(section_name) or {}

    def get_data(self, data_name):
        data = self.get_section("test_data").get(data_name, {})
        return data

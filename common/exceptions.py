class InvalidArgumentError(ValueError):
    """调用方传入了不支持的参数（如身份证长度不是 15 或 18）"""

"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 公式求值器参数
EVALUATOR_CONFIG = {
    "cache_size": 1000,  # LRU缓存的最大公式数
    "allow_partial": False,  # 默认要求公式求值后栈中只剩1个元素
}

# 计算器参数
CALCULATOR_CONFIG = {
    "zero_division": "raise",  # 除数为零时抛出DivisionByZeroError，不返回inf/NaN
}

# 日志配置
LOGGING_CONFIG = {
    "level": logging.INFO,
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


def setup_logging(level=None):
    """按LOGGING_CONFIG设置根日志"""
    logging.basicConfig(
        level=level if level is not None else LOGGING_CONFIG["level"],
        format=LOGGING_CONFIG["format"]
    )


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert EVALUATOR_CONFIG["cache_size"] > 0, "缓存大小必须为正数"
    assert isinstance(EVALUATOR_CONFIG["allow_partial"], bool), "allow_partial必须是bool"
    assert CALCULATOR_CONFIG["zero_division"] == "raise", "除零策略只支持raise"
    logger.info("Configuration validated successfully!")

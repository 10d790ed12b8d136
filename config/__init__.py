"""配置模块"""
from .config import EVALUATOR_CONFIG, CALCULATOR_CONFIG, LOGGING_CONFIG, setup_logging, validate_config

__all__ = ['EVALUATOR_CONFIG', 'CALCULATOR_CONFIG', 'LOGGING_CONFIG', 'setup_logging', 'validate_config']

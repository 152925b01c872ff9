"""配置文件"""
import logging

# 计算参数
CALC_CONFIG = {
    "rpn": False,  # 默认按中缀表达式解析
    "precision": 15,  # 输出的有效数字位数，同 printf("%.15G")
}

# 日志参数
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

# 命令行帮助里的示例
CLI_EXAMPLES = [
    'calc "sin(3.1415926)"',
    'calc "(5 + 3) * 7"',
    'calc "2^3"',
    'calc -r "pi sin"',
    'calc -r "5 3 7 * +"',
    'calc -r "2 3 ^"',
    'for Unix sh: A=`calc "3+1"`; B=`calc "$A*4"`',
]


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert 1 <= CALC_CONFIG["precision"] <= 17, "double最多17位有效数字"
    assert isinstance(CALC_CONFIG["rpn"], bool), "rpn必须是bool"
    assert isinstance(logging.getLevelName(LOGGING_CONFIG["level"]), int), "未知的日志级别"

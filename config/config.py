"""配置文件"""

# 求值引擎参数（固定常量，不对调用方开放）
ENGINE_CONFIG = {
    "significant_digits": 12,  # 结果保留12位有效数字，消除二进制浮点噪声
    "percent_divisor": 100,  # 50% -> (50/100)
    "empty_result": 0.0,  # 空输入或纯空白输入直接返回0
}

# 会话/历史参数
SESSION_CONFIG = {
    "history_limit": 100,  # 最多保留100条历史，超出丢弃最旧的
    "storage_key": "cleancalc_state",
    "state_path": "~/.cleancalc/state.json",
}

# 日志参数（仅入口处配置）
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert ENGINE_CONFIG["significant_digits"] == 12, "结果精度固定为12位有效数字"
    assert ENGINE_CONFIG["percent_divisor"] == 100, "百分号等价于除以100"
    assert SESSION_CONFIG["history_limit"] == 100, "历史记录上限为100条"
    assert SESSION_CONFIG["storage_key"], "存储键不能为空"
    return True

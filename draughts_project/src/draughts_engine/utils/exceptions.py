"""
异常定义

定义跳棋规则引擎的各种异常类型。
"""


class DraughtsError(Exception):
    """
    跳棋规则引擎基础异常

    所有跳棋引擎相关异常的基类。
    """

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class InvalidSizeError(DraughtsError):
    """
    棋盘尺寸异常

    当棋盘尺寸不满足 xsize >= 2 且 ysize >= 3 时抛出。
    """

    def __init__(self, xsize, ysize):
        message = f"无效的棋盘尺寸: {xsize}x{ysize}, 要求 xsize >= 2 且 ysize >= 3"
        super().__init__(message, "INVALID_SIZE")
        self.xsize = xsize
        self.ysize = ysize


class InvalidCoordinateError(DraughtsError):
    """
    坐标异常

    当访问棋盘外的坐标时抛出。
    """

    def __init__(self, pos, reason: str = ""):
        message = f"无效的坐标: {pos}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "INVALID_COORDINATE")
        self.pos = pos
        self.reason = reason


class InvalidPieceValueError(DraughtsError):
    """
    棋子编码异常

    当整数值不是合法的棋子编码时抛出。
    """

    def __init__(self, value):
        message = f"无效的棋子编码: {value}"
        super().__init__(message, "INVALID_PIECE")
        self.value = value


class InvalidBoardError(DraughtsError):
    """
    棋盘状态异常

    当棋盘矩阵未通过完整性检查时抛出。
    """

    def __init__(self, errors):
        self.errors = list(errors)
        message = "棋盘状态不合法"
        if self.errors:
            message += ": " + "; ".join(self.errors)
        super().__init__(message, "INVALID_BOARD")


class MoveRejectedError(DraughtsError):
    """
    走法被拒绝异常

    当提交的走法中某一步未通过验证时抛出，棋局保持不变。
    """

    def __init__(self, segment_index: int, rule=None, reason: str = ""):
        message = f"非法走法: 第{segment_index + 1}步"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "MOVE_REJECTED")
        self.segment_index = segment_index
        self.rule = rule
        self.reason = reason


class NoHistoryError(DraughtsError):
    """
    无历史记录异常

    当走法历史为空时请求悔棋抛出。
    """

    def __init__(self):
        super().__init__("没有可撤销的走法", "NO_HISTORY")


class ConfigurationError(DraughtsError):
    """
    配置错误异常

    当配置参数无效时抛出。
    """

    def __init__(self, config_name: str, reason: str = ""):
        message = f"配置错误 - {config_name}"
        if reason:
            message += f": {reason}"
        super().__init__(message, "CONFIG_ERROR")
        self.config_name = config_name
        self.reason = reason

"""
对话录入的错误分类。

只有 ModelUnavailable、EmptyModelResponse、TurnCancelled 会抛给调用方；
JSON 块格式错误（MalformedExtractionBlock）在解析器内部消化，退化为「仍在收集信息」。
"""


class IntakeError(Exception):
    """对话录入失败的基类；code / status_code 供 API 层映射响应。"""

    code = "intake_error"
    status_code = 500
    message = "客户录入对话失败"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class ModelUnavailable(IntakeError):
    """模型服务调用失败（网络、鉴权、限流、超时等），可整轮重试。"""

    code = "model_unavailable"
    status_code = 503
    message = "AI 服务暂时不可用，请稍后重试"


class EmptyModelResponse(IntakeError):
    """模型未返回任何候选或内容为空，可整轮重试。"""

    code = "empty_model_response"
    status_code = 503
    message = "AI 未返回有效回复，请重试"


class TurnCancelled(IntakeError):
    """调用方取消了本轮对话（如客户端断开）。"""

    code = "cancelled"
    status_code = 499
    message = "本轮对话已取消"


class MalformedExtractionBlock(ValueError):
    """模型回复中的 JSON 块无法解析为扁平的字符串映射。"""

"""发布器出站端口 - 定义发布适配器必须实现的接口"""

from typing import Protocol, runtime_checkable

from ....domain.entities import PublishRequest, PublishResponse


@runtime_checkable
class ArticlePublisherPort(Protocol):
    """
    文章发布端口

    基础设施层的具体发布器（如 CSDN）实现此接口。
    """

    def publish(self, request: PublishRequest) -> PublishResponse:
        """
        发布文章

        远端拒绝（非 2xx）以失败的 PublishResponse 返回，不抛出异常。

        Args:
            request: 发布请求

        Returns:
            发布结果

        Raises:
            NetworkError: 网络层故障（连接失败、超时等）
        """
        ...

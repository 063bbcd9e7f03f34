# lint_hub/exceptions.py
"""
本模块定义了 Lint-Hub 项目中所有自定义的、语义化的异常类型。

配置类错误在构造阶段同步抛出，绝不推迟到匹配阶段；
资源形态不匹配则不属于错误，规则会静默跳过该资源。
"""


class LintHubError(Exception):
    """
    所有 Lint-Hub 自定义异常的通用基类。
    捕获此异常可以处理所有源自本项目的预期错误。
    """
    pass


class ConfigurationError(LintHubError):
    """
    表示在加载、解析或验证配置时发生的错误。
    例如，正则表达式语法错误、DNT 术语文件格式不正确或缺少必需的构造参数。
    """
    pass


class RuleNotFoundError(LintHubError, KeyError):
    """
    表示尝试访问一个未注册的规则时引发的错误。
    继承自 KeyError 是为了保持与字典查找行为的一致性。
    """
    pass

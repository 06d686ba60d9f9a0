from .config_payloads import config_result_to_loggable

__all__ = ["config_result_to_loggable"]

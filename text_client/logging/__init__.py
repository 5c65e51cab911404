from text_client.logging.logger import JSONFormatter, log_fields, setup_logging

__all__ = ["JSONFormatter", "log_fields", "setup_logging"]

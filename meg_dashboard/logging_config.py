import logging
from logging.handlers import RotatingFileHandler

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(name, level="INFO", format=DEFAULT_FORMAT, filename=None):
    """Configura um logger individual (console + arquivo opcional com rotação)"""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # create_app pode ser chamado várias vezes (testes)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if filename:
        handler = RotatingFileHandler(
            filename,
            maxBytes=1024*1024,  # 1MB
            backupCount=5,
            encoding='utf-8'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Evita que logs sejam propagados para o logger root
    logger.propagate = False
    return logger


def get_logger(name):
    """Retorna um logger configurado"""
    return logging.getLogger(name)

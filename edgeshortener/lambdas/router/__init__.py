from edgeshortener.utils import initialize_logging


initialize_logging()

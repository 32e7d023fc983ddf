from edgeshortener.dao.base.short_url_base_dao import ShortURLBaseDAO
from edgeshortener.dao.base.secret_base_dao import SecretBaseDAO


__all__ = [
    'ShortURLBaseDAO',
    'SecretBaseDAO',
]

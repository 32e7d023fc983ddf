from edgeshortener.dao.secrets.secrets_manager_dao import SecretsManagerDAO


__all__ = [
    'SecretsManagerDAO',
]

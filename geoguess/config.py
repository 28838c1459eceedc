from pydantic_settings import BaseSettings
import os

class DatabaseConfig(BaseSettings):
    HOST: str = os.getenv('POSTGRES_HOST', 'localhost')
    PORT: int = int(os.getenv('POSTGRES_PORT', 5432))
    DATABASE: str = os.getenv('POSTGRES_DB', 'geoguess')
    USER: str = os.getenv('POSTGRES_USER', 'postgres')
    PASSWORD: str = os.getenv('POSTGRES_PASSWORD', 'postgres')
    MIN_POOL_SIZE: int = 1
    MAX_POOL_SIZE: int = 20
    COMMAND_TIMEOUT: float = 10

database = DatabaseConfig()

class KafkaConfig(BaseSettings):
    bootstrap_servers: str = os.getenv('KAFKA_BOOTSTRAP_SERVERS', 'localhost:9092')
    topic: str = os.getenv('KAFKA_GUESS_TOPIC', 'guesses')
    producer_config: dict = {
        'bootstrap_servers': os.getenv('KAFKA_BOOTSTRAP_SERVERS', 'localhost:9092'),
        'key_serializer': lambda k: k.encode('utf-8'),
        'value_serializer': lambda v: v.encode('utf-8'),
        'request_timeout_ms': 1000,
        'retry_backoff_ms': 100,
        'security_protocol': "PLAINTEXT",
        'client_id': 'geoguess-producer'
    }
    max_retries: int = 3
    retry_delay: int = 1

kafka = KafkaConfig()

class AppConfig(BaseSettings):
    base_url: str = os.getenv('BASE_URL', 'http://localhost:8000')
    log_level: str = os.getenv('LOG_LEVEL', 'INFO')

app = AppConfig()

class AuthConfig(BaseSettings):
    secret_key: str = os.getenv('JWT_SECRET', 'dev-change-this-secret')
    algorithm: str = os.getenv('JWT_ALG', 'HS256')

auth = AuthConfig()

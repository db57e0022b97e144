from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettingsSchema(BaseModel):
    level: str = 'WARNING'
    format: str = '%(asctime)s %(name)s - %(levelname)s - %(message)s'


class EntitySettingsSchema(BaseModel):
    strict: bool = False


class SettingsSchema(BaseSettings):
    logging: LoggingSettingsSchema = Field(default_factory=LoggingSettingsSchema)
    entity: EntitySettingsSchema = Field(default_factory=EntitySettingsSchema)
    model_config = SettingsConfigDict(
        env_prefix='GRAPHQL_RESPONSE__',
        env_file='.env',
        env_file_encoding='utf-8',
        env_nested_delimiter='__',
        case_sensitive=False,
        extra='ignore',
    )


settings = SettingsSchema()

import dotenv
from pydantic.v1 import BaseSettings


class EnvSettings(BaseSettings):
    # deployment
    stage: str | None = None
    service: str | None = None
    stack_name: str | None = None

    # descriptors
    config_file: str = "serverless.yml"
    descriptor_key: str = "cloudfrontInvalidate"

    # aws
    region: str | None = None
    profile: str | None = None
    cacert: str | None = None

    # dispatch
    no_deploy: bool = False
    delay: float = 1.0

    # debug
    verbose: bool = False

    class Config:
        env_file = dotenv.find_dotenv(usecwd=True)
        env_prefix = "cfi_"


env = EnvSettings()

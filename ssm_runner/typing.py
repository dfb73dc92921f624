from typing import TypeAlias

T_ACCESS_KEY_ID: TypeAlias = str
T_SECRET_KEY: TypeAlias = str
T_REGION_NAME: TypeAlias = str
T_TOKEN: TypeAlias = str
T_INSTANCE_ID: TypeAlias = str
T_COMMAND_ID: TypeAlias = str
T_INVOCATION_RESPONSE: TypeAlias = dict

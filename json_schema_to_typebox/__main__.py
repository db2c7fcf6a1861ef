from .json_schema_to_typebox import json_schema_to_typebox

json_schema_to_typebox()

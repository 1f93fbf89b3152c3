from .substitution import EntitySubstitution, decode_entities
from .table import ENTITIES

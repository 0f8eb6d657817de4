from models.base import Base
from models.record import Record, DictRecord, read_attribute

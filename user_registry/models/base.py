# File: user_registry/models/base.py

from sqlalchemy import MetaData

# Every table registers here; init_db creates whatever is on it.
metadata = MetaData()

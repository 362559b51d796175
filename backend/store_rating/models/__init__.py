from store_rating.models.base import Base
from store_rating.models.user import User
from store_rating.models.store import Store
from store_rating.models.rating import Rating

from store_rating.schemas.auth import RegisterRequest, LoginRequest, RegisterResponse, LoginResponse, UserOut, SessionUser
from store_rating.schemas.user import PasswordChangeRequest, MessageOut
from store_rating.schemas.rating import RatingRequest, RatingOut
from store_rating.schemas.store import StoreListItem, OwnerDashboardOut, RaterOut, StoreOut
from store_rating.schemas.admin import AdminUserCreate, AdminStoreCreate, AdminUserRow, AdminStoreRow, StatsOut

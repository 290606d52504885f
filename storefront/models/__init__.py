from .product import Product
from .user import User

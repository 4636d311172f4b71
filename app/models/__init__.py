from app.models.user import User
from app.models.product import Product
from app.models.cart import CartItem

# add ALL models here

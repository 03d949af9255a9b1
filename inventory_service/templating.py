from fastapi.templating import Jinja2Templates
from inventory_service.config import PACKAGE_DIR

templates = Jinja2Templates(directory=str(PACKAGE_DIR / "templates"))

from flask import Blueprint

admin_bp = Blueprint("admin", __name__, url_prefix="/api/admin")

# Import modules so routes attach
from . import auth  # noqa - placeholder login
from . import institutions  # noqa
from . import faculties  # noqa - faculties and their courses
from . import companies  # noqa
from . import users  # noqa
from . import admissions  # noqa
from . import reports  # noqa

__all__ = ["admin_bp"]

from .panels import Panels

from .areas import AreasPage
from .contact import ContactPage, EmailJsSender
from .home import HomePage
from .trees import TreesPage

__all__ = ["AreasPage", "ContactPage", "EmailJsSender", "HomePage", "TreesPage"]

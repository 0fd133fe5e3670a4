"""Terminal drawing and key handling for dualtodo."""
from dualtodo.ui import input, screen

"""``runserver`` that listens on ``settings.PORT`` unless a port is given."""

from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import (
    Command as StaticfilesRunserverCommand,
)


class Command(StaticfilesRunserverCommand):
    default_port = str(settings.PORT)

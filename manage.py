#!/usr/bin/env python
"""
Command line entry point for the SocDoc backend.

Typical use::

    python manage.py migrate --run-syncdb
    python manage.py load_hospitals hospitals.json
    python manage.py runserver
"""
import os
import sys


def main() -> None:
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'socdoc.settings')
    try:
        from django.core.management import execute_from_command_line  # type: ignore
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Is it installed and is the virtual "
            "environment active?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()

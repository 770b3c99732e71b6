"""
This is an extension of the default test_settings.py file that uses MySQL for
the backend. SQLite is fine for most of the prefixes app, but MySQL compares
strings differently (e.g. trailing spaces), which matters for the one-time
backfill of empty prefixes.

Run the tests against it with:
pytest --ds=mysql_test_settings

If you need a compatible MySQL server running locally, spin one up with:
docker run --rm \
    -e MYSQL_DATABASE=test_pd_db \
    -e MYSQL_USER=test_pd_user \
    -e MYSQL_PASSWORD=test_pd_pass \
    -e MYSQL_RANDOM_ROOT_PASSWORD=true \
    -p 3306:3306 mysql:8
"""

from test_settings import *

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.mysql",
        "NAME": "pd_db",
        "USER": "test_pd_user",
        "PASSWORD": "test_pd_pass",
        "HOST": "127.0.0.1",
        "PORT": "3306",
        "OPTIONS": {
            "charset": "utf8mb4"
        }
    }
}

"""Django settings used to run the test suite."""

SECRET_KEY = 'bowltracker-tests'

DEBUG = False

INSTALLED_APPS = [
    'rest_framework',
    'bowltracker',
]

USE_TZ = True

BOWLTRACKER_LOG_SCORES = True

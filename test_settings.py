from pathlib import Path
import tempfile

BASE_DIR = Path(__file__).resolve().parent

SECRET_KEY = 'pdfdocs-test-key'

DEBUG = False

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'pdfdocs',
    'reports',
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {},
    },
]

USE_I18N = True
LANGUAGE_CODE = 'en'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Generated files go to a throwaway directory
PDFDOCS_OUTPUT_DIR = Path(tempfile.mkdtemp(prefix='pdfdocs-tests-'))

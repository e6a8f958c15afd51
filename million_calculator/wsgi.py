#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e .
#setup: flask --app million_calculator.wsgi run --port 5000 --debug

from million_calculator.app import create_app
from million_calculator.config import get_settings
from million_calculator.log import setup_logging

settings = get_settings()
setup_logging(settings.LOG_LEVEL)

app = create_app(settings)


if __name__ == "__main__":
    app.run(host=settings.API_HOST, port=settings.API_PORT, debug=settings.DEBUG)

import logging

from dataprofile_web.app_factory import create_app, load_settings

if __name__ == "__main__":
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(settings)
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])

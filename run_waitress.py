# run_waitress.py
# Sirve la app Flask con Waitress (HOST/PORT desde el entorno o .env).

from waitress import serve

from app import create_app

if __name__ == "__main__":
    application = create_app()
    host = application.config["HOST"]
    port = application.config["PORT"]
    application.logger.info("[Waitress] Sirviendo en http://%s:%s", host, port)
    serve(application, host=host, port=port)

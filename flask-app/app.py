from flask import Flask, Response
from werkzeug.routing import BaseConverter
import logging
import os
import socket
import sys

GREETING = '[v4] Hello, Kubernetes, from {}!\n'
UNKNOWN_HOST = 'unknown'

HOST = '0.0.0.0'
DEFAULT_PORT = 8080

logger = logging.getLogger(__name__)

class AnyPathConverter(BaseConverter):
    """Matches the rest of the path, empty and slash-led segments included."""
    regex = '.*'
    part_isolating = False

app = Flask(__name__)
app.url_map.merge_slashes = False
app.url_map.converters['anypath'] = AnyPathConverter

def get_hostname():
    """Return the trimmed OS hostname, or a placeholder if it can't be read."""
    try:
        hostname = socket.gethostname().strip()
    except OSError as e:
        logger.warning('Could not read hostname: %s', e)
        return UNKNOWN_HOST
    if not hostname:
        logger.warning('OS reported an empty hostname')
        return UNKNOWN_HOST
    return hostname

def greeting(hostname):
    return GREETING.format(hostname)

@app.route('/', defaults={'path': ''})
@app.route('/<anypath:path>')
def hello(path):
    return Response(greeting(get_hostname()), mimetype='text/plain')

def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    try:
        port = int(os.getenv('PORT', DEFAULT_PORT))
    except ValueError:
        logger.error('Invalid PORT value: %r', os.getenv('PORT'))
        sys.exit(1)

    logger.info('Listening on %s:%d', HOST, port)
    # Werkzeug reports bind errors itself and exits with status 1.
    app.run(host=HOST, port=port, debug=False, threaded=True)

if __name__ == '__main__':
    main()

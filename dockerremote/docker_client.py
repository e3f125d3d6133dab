import logging

from .config import DEFAULT_TIMEOUT, ClientConfig
from .transport import Transport

_LOG = logging.getLogger(__name__)

OMIT = 'omit'
EMPTY_OBJECT = 'empty_object'

# How empty collections are sent, per operation and parameter.
EMPTY_COLLECTIONS = {
    'create_container': {
        'PortSpecs': OMIT,
        'Dns': OMIT,
        'Volumes': EMPTY_OBJECT,
    },
}

IMAGE_FORMATS = ('json', 'viz')


def normalize(operation, params):
    for key, rule in EMPTY_COLLECTIONS.get(operation, {}).items():
        value = params.get(key)
        if isinstance(value, str):
            value = [value]
        if rule == OMIT:
            params[key] = list(value) if value else None
        elif rule == EMPTY_OBJECT:
            if not value:
                params[key] = {}
            elif isinstance(value, dict):
                params[key] = dict(value)
            else:
                params[key] = {item: {} for item in value}
    return params


def _path(template, identifier):
    if identifier is None or not str(identifier).strip():
        raise ValueError('An identifier is mandatory for %s' % template)
    return template % identifier


class DockerClient(Transport):
    """One method per Docker Remote API endpoint.

    Every method returns a :class:`~dockerremote.result.Result` holding the
    decoded JSON response.
    """

    def __init__(self, host, port, scheme='http', timeout=DEFAULT_TIMEOUT, body_encoding='form',
                 reuse_connections=False, session=None):
        config = ClientConfig(host, port, scheme=scheme, timeout=timeout, body_encoding=body_encoding,
                              reuse_connections=reuse_connections)
        super().__init__(config, session=session)

    @classmethod
    def from_config(cls, config, session=None):
        return cls(config.host, config.port, scheme=config.scheme, timeout=config.timeout,
                   body_encoding=config.body_encoding, reuse_connections=config.reuse_connections,
                   session=session)

    @classmethod
    def from_env(cls, environ=None):
        return cls.from_config(ClientConfig.from_env(environ))

    # Containers

    def containers(self, all=False, limit=-1, since=None, before=None, size=False):
        """List containers. Only running ones unless ``all`` is set."""
        params = {
            'all': all,
            'limit': limit,
            'since': since,
            'before': before,
            'size': size,
        }
        return self.get('/containers/json', params)

    def create_container(self, hostname='', user='', memory=0, memory_swap=0, attach_stdin=False,
                         attach_stdout=True, attach_stderr=True, port_specs=None, tty=False,
                         open_stdin=False, stdin_once=False, env=None, cmd=None, dns=None,
                         image='base', volumes=None, volumes_from=''):
        """Create a new container.

        ``volumes`` may be a list of container paths or a mapping of path to
        options. When empty it is still sent, as an empty object.
        """
        _LOG.info('Create Container: Image %s - Hostname %s', image, hostname)
        params = {
            'Hostname': hostname,
            'User': user,
            'Memory': memory,
            'MemorySwap': memory_swap,
            'AttachStdin': attach_stdin,
            'AttachStdout': attach_stdout,
            'AttachStderr': attach_stderr,
            'PortSpecs': port_specs,
            'Tty': tty,
            'OpenStdin': open_stdin,
            'StdinOnce': stdin_once,
            'ENV': env,
            'Cmd': cmd,
            'Dns': dns,
            'Image': image,
            'Volumes': volumes,
            'VolumesFrom': volumes_from,
        }
        return self.post('/containers/json', normalize('create_container', params))

    def inspect(self, id):
        return self.get(_path('/containers/%s/json', id))

    def changes(self, id):
        """Filesystem changes of container ``id``."""
        return self.get(_path('/containers/%s/changes', id))

    def export(self, id):
        return self.get(_path('/containers/%s/export', id))

    def start(self, id, host_config=None):
        _LOG.info('Start Container: %s', id)
        return self.post(_path('/containers/%s/start', id), host_config)

    def stop(self, id, time=2):
        """Stop container ``id``, killing it after ``time`` seconds."""
        _LOG.info('Stop Container: %s', id)
        return self.post(_path('/containers/%s/stop', id), {'t': time})

    def restart(self, id, time=2):
        _LOG.info('Restart Container: %s', id)
        return self.post(_path('/containers/%s/restart', id), {'t': time})

    def kill(self, id):
        _LOG.info('Kill Container: %s', id)
        return self.post(_path('/containers/%s/kill', id))

    def attach(self, id, logs=False, stream=False, stdin=False, stdout=False, stderr=False):
        params = {
            'logs': logs,
            'stream': stream,
            'stdin': stdin,
            'stdout': stdout,
            'stderr': stderr,
        }
        return self.post(_path('/containers/%s/attach', id), params)

    def wait(self, id):
        """Block until container ``id`` stops; the value carries its exit code."""
        return self.post(_path('/containers/%s/wait', id))

    def remove_container(self, id, remove_volumes=False):
        _LOG.info('Remove Container: %s', id)
        return self.delete(_path('/containers/%s', id), {'v': remove_volumes})

    # Images

    def images(self, all=False, format='json'):
        if format not in IMAGE_FORMATS:
            raise ValueError('Invalid image list format: %s' % format)
        return self.get('/images/' + format, {'all': all})

    def create_image(self, from_image=None, from_source=None, repo=None, tag=None, registry=None):
        """Pull ``from_image`` from a registry or import ``from_source`` ('-' for stdin)."""
        _LOG.info('Create Image: from image %s - from source %s', from_image, from_source)
        params = {
            'fromImage': from_image,
            'fromSrc': from_source,
            'repo': repo,
            'tag': tag,
            'registry': registry,
        }
        return self.post('/images/create', params)

    def insert_image(self, name, path, url):
        """Insert the file at ``url`` into image ``name`` at ``path``."""
        return self.post(_path('/images/%s/insert', name), {'path': path, 'url': url})

    def inspect_image(self, name):
        return self.get(_path('/images/%s/json', name))

    def history(self, name):
        return self.get(_path('/images/%s/history', name))

    def push(self, name, registry=None):
        _LOG.info('Push Image: %s', name)
        return self.post(_path('/images/%s/push', name), {'registry': registry})

    def tag(self, name, repo=None, force=False):
        return self.post(_path('/images/%s/tag', name), {'repo': repo, 'force': force})

    def remove_image(self, name):
        _LOG.info('Remove Image: %s', name)
        return self.delete(_path('/images/%s', name))

    def search(self, term):
        return self.get('/images/search', {'term': term})

    # Misc

    def build(self, tag):
        return self.post('/build', {'tag': tag})

    def auth(self, username, password, email):
        return self.post('/auth', {'username': username, 'password': password, 'email': email})

    def info(self):
        return self.get('/info')

    def version(self):
        return self.get('/version')

    def commit(self, container, repo=None, tag=None, message=None, author=None, run=None):
        """Create an image from ``container``.

        ``run`` is the config applied when the image is run, for example
        ``{'Cmd': ['cat', '/world'], 'PortSpecs': ['22']}``.
        """
        _LOG.info('Commit Container: %s', container)
        params = {
            'container': container,
            'repo': repo,
            'tag': tag,
            'message': message,
            'author': author,
            'run': run,
        }
        return self.post('/commit', params)

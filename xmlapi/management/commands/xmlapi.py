import json

from django.core.management.base import BaseCommand, CommandError

from xmlapi.clients import get_client
from xmlapi.exceptions import XmlApiError

OPERATIONS = {
    'copy-device': ('copy_device', ['device_id', 'new_device_id', 'filename']),
    'create-file': ('create_file', ['device_id', 'filename', 'root_name']),
    'create-node': ('create_node', ['device_id', 'filename', 'parent_path', 'tag', 'value']),
    'delete-node': ('delete_node', ['device_id', 'filename', 'path']),
    'delete-file': ('delete_file', ['device_id', 'filename']),
    'list-files': ('list_files', ['device_id']),
    'read-node': ('read_node', ['device_id', 'filename', 'path']),
    'update-node': ('update_node', ['device_id', 'filename', 'path', 'value']),
}


class Command(BaseCommand):
    help = "Run one operation against the XML node service and print the result as JSON."

    def add_arguments(self, parser):
        parser.add_argument('--base-url', help="Service address, overrides XMLAPI_BASE_URL.")
        parser.add_argument('--api-key', help="API key, overrides XMLAPI_API_KEY.")
        parser.add_argument('--timeout', type=float, help="Per-request timeout in seconds.")

        subparsers = parser.add_subparsers(dest='operation', required=True)
        subparsers.add_parser('authorize', help="Check that the API key is accepted.")
        for name, (_, arguments) in OPERATIONS.items():
            subparser = subparsers.add_parser(name)
            for argument in arguments:
                if name == 'copy-device' and argument == 'filename':
                    subparser.add_argument(argument, nargs='?', default='')
                else:
                    subparser.add_argument(argument)
            if name == 'copy-device':
                subparser.add_argument('--overwrite', action='store_true')

    def handle(self, *args, **options):
        client = get_client(
            api_key=options['api_key'],
            base_url=options['base_url'],
            timeout=options['timeout'],
        )
        operation = options['operation']

        try:
            if operation == 'authorize':
                auth = client.authorize()
                result = {'authorized': True, 'expires': auth.expires}
            else:
                method_name, arguments = OPERATIONS[operation]
                kwargs = {argument: options[argument] for argument in arguments}
                if operation == 'copy-device':
                    kwargs['overwrite'] = options['overwrite']
                result = getattr(client, method_name)(**kwargs)
        except XmlApiError as exc:
            raise CommandError(f"{operation} failed: {exc}") from exc

        if hasattr(result, 'to_dict'):
            result = result.to_dict()
        self.stdout.write(json.dumps(result, ensure_ascii=False, indent=2))

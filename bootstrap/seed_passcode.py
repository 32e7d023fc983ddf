#!/usr/bin/env python3
"""
Seed (or rotate) the shared passcode in AWS Secrets Manager.

This CLI follows this procedure to publish the passcode:
- Step 1: Take the passcode from --passcode, or generate a random one
- Step 2: Check it can be carried verbatim in a cookie value
- Step 3: Create the secret, or put a new value if it already exists

CLI usage:
    $ python -m bootstrap.seed_passcode --app-name edgeshortener --env dev
    $ python -m bootstrap.seed_passcode --app-name edgeshortener --env dev --dry-run
    $ python -m bootstrap.seed_passcode --secret-id edgeshortener/prod/passcode --aws-profile prod
    $ python -m bootstrap.seed_passcode --app-name edgeshortener --env local --endpoint-url http://localhost:4566

Behavior:
    - The secret is named <AppName>/<env>/passcode unless --secret-id is given.
      Point the PASSCODE_SECRET environment variable of the lambdas at it.
    - Payload (SecretString) is {"passcode": "<value>"}.
    - Never prints the passcode. Browsers receive it from the editor page.
    - The lambdas read the secret on every request, so a rotation applies
      to the very next request.

Raises:
    ValueError: For a passcode that isn't cookie-safe or malformed --tags input.
    botocore.exceptions.BotoCoreError / ClientError: For AWS API failures.
"""

import argparse
import json
import re
import secrets
from typing import Any

import boto3


PASSCODE_KEY = 'passcode'

# RFC 6265 cookie-octet, minus '%' so values survive percent-unescaping unchanged
COOKIE_SAFE = re.compile(r"[!#$&'()*+\-./0-9:<=>?@A-Z\[\]^_`a-z{|}~]+")


def generate_passcode(nbytes: int = 24) -> str:
    """Return a random URL-safe passcode with `nbytes` bytes of entropy."""
    return secrets.token_urlsafe(nbytes)


def validate_passcode(passcode: str) -> str:
    if not COOKIE_SAFE.fullmatch(passcode):
        raise ValueError('Passcode must be non-empty and only hold cookie-safe characters (no spaces, quotes, commas, semicolons or %).')
    return passcode


def normalize_user_tags(tag_str: str) -> list[dict[str, str]]:
    """Turn "Key1=Val1,Key2=Val2" into AWS tag dicts.

    Raises:
        ValueError: if any entry is missing '=' or has an empty key.
    """
    tags: list[dict[str, str]] = []
    for raw in (tag_str or '').split(','):
        item = raw.strip()
        if not item:
            continue
        key, sep, value = item.partition('=')
        if not sep or not key.strip():
            raise ValueError(f"Malformed tag (expected key=value): '{item}'")
        tags.append({'Key': key.strip(), 'Value': value.strip()})
    return tags


def create_or_update_secret(
    secrets_client,
    name: str,
    payload: dict[str, Any],
    *,
    tags: list[dict[str, str]] | None = None,
    dry_run: bool = False,
) -> str:
    """Create the secret, or put a new value on it if it exists.

    Returns:
        str: 'created', 'updated' or 'dry-run'
    """
    msg = f"Secrets upsert name='{name}' keys={list(payload)}"
    if dry_run:
        print('[DRY-RUN]', msg)
        return 'dry-run'

    try:
        arn = secrets_client.describe_secret(SecretId=name).get('ARN')
    except secrets_client.exceptions.ResourceNotFoundException:
        kwargs: dict[str, Any] = {'Name': name, 'SecretString': json.dumps(payload)}
        if tags:
            kwargs['Tags'] = tags
        secrets_client.create_secret(**kwargs)
        print(msg + ' [created]')
        return 'created'

    secrets_client.put_secret_value(SecretId=name, SecretString=json.dumps(payload))
    if tags:
        secrets_client.tag_resource(SecretId=arn or name, Tags=tags)
    print(msg + ' [updated]')
    return 'updated'


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='seed_passcode.py',
        description='Create or rotate the shared passcode secret in AWS Secrets Manager',
    )
    parser.add_argument('--app-name', default='edgeshortener', help='Application name for the secret name prefix (default: edgeshortener)')
    parser.add_argument('--env', default='local', help='Application environment for the secret name (default: local)')
    parser.add_argument('--secret-id', default=None, help='Full secret name, overrides <app-name>/<env>/passcode')
    parser.add_argument('--passcode', default=None, help='Passcode to publish. A random one is generated if omitted.')
    parser.add_argument('--tags', default='', help='Comma-separated tags to attach, e.g. "Owner=ops,Service=edgeshortener"')
    parser.add_argument('--aws-profile', default=None, help='AWS shared config/credentials profile name')
    parser.add_argument('--endpoint-url', default=None, help='Secrets Manager endpoint, e.g. LocalStack at http://localhost:4566')
    parser.add_argument('--dry-run', action='store_true', help='Preview actions without writing to AWS')
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, secrets_client=None) -> str:
    args = parse_args(argv)

    name = args.secret_id or f'{args.app_name}/{args.env}/{PASSCODE_KEY}'
    passcode = validate_passcode(args.passcode) if args.passcode is not None else generate_passcode()
    tags = [
        {'Key': 'App', 'Value': args.app_name},
        {'Key': 'Env', 'Value': args.env},
    ] + normalize_user_tags(args.tags)

    if secrets_client is None:
        session = boto3.Session(profile_name=args.aws_profile) if args.aws_profile else boto3.Session()
        secrets_client = session.client('secretsmanager', endpoint_url=args.endpoint_url)

    return create_or_update_secret(secrets_client, name, {PASSCODE_KEY: passcode}, tags=tags, dry_run=args.dry_run)


if __name__ == '__main__':
    # Let exceptions raise naturally; a traceback signals non-zero exit to the shell.
    main()

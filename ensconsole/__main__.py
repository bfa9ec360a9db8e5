# make it possible to run the console with 'python -m ensconsole'


def main():
    from ensconsole.ui.cli import cli

    # auto_envvar_prefix on a @click.group will cause all options to be
    # available also through environment variables prefixed with given prefix
    # http://click.pocoo.org/6/options/#values-from-environment-variables
    cli(auto_envvar_prefix="ENSCONSOLE")  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    main()

import yaml

# These configs are populated by default
default_config = {
        'upstream': 'master',
        'check_for_updates': False,
        'color': True,
}

# These fields are required to be non-null
required_fields = ['upstream']

def load_config(filepath=None):
    config = dict(default_config)

    if filepath is not None:
        with open(filepath, "r") as config_yaml:
            loaded_config = yaml.safe_load(config_yaml)
            if loaded_config is not None:
                if not isinstance(loaded_config, dict):
                    raise ValueError("{} is not a mapping".format(filepath))
                config.update(loaded_config)

    for field in required_fields:
        if field not in config or config[field] is None:
            raise KeyError(field)

    return config

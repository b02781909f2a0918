from ruamel.yaml import YAML

def get_yaml_instance() -> YAML:
    yaml = YAML(typ="rt")
    yaml.default_flow_style = False
    yaml.explicit_start = False
    yaml.allow_duplicate_keys = False
    yaml.width = 4096
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml

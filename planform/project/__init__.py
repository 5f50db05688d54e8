from planform.project.io import load_preset_config, preset_config_from_dict, preset_config_to_dict, save_preset_config

__all__ = ["load_preset_config", "preset_config_from_dict", "preset_config_to_dict", "save_preset_config"]

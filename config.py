import yaml
from pathlib import Path

DEFAULT_CONFIG = {
    "analyzer": {
        "top_n": 20,
        "exclude_bots": False
    },
    "report": {
        "format": "excel",
        "output_dir": "results"
    },
    "logging": {
        "level": "WARNING"
    }
}

class Config:
    def __init__(self, config_path=None):
        self.config = self._update_recursive({}, DEFAULT_CONFIG)
        if config_path:
            self.load(config_path)
    
    def load(self, config_path):
        path = Path(config_path)
        if not path.exists():
            print(f"Конфигурация {path} не найдена, используются значения по умолчанию")
            return
        
        try:
            with open(path, 'r', encoding='utf-8') as f:
                user_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            print(f"Ошибка при загрузке конфигурации: {e}")
            return
        if not isinstance(user_config, dict):
            print(f"Ошибка при загрузке конфигурации: ожидался словарь в {path}")
            return
        self._update_recursive(self.config, user_config)
        print(f"Конфигурация загружена из {path}")
            
    def _update_recursive(self, d, u):
        for k, v in u.items():
            if isinstance(v, dict):
                d[k] = self._update_recursive(d.get(k, {}), v)
            else:
                d[k] = v
        return d
    
    def get(self, path, default=None):
        keys = path.split('.')
        val = self.config
        for key in keys:
            if isinstance(val, dict):
                val = val.get(key)
            else:
                return default
        return val if val is not None else default

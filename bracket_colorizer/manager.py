import json
import os

from collections import ChainMap
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .classifier import HeuristicAnglePolicy
from .classifier import StrictAnglePolicy
from .color_scheme import ColorScheme
from .consts import DEFAULT_COLORS
from .consts import DEFAULT_ERROR_COLOR
from .consts import SETTINGS_FILE
from .errors import SettingsError
from .executor import BracketMatcher
from .logger import Logger
from .model import BracketCollection, Language


Config = Mapping[str, Any]


def compile_config(
    config: Dict[str, Any],
    syntax: Optional[str],
    base: Config
):
    """
    Resolve the derived entries of one config in place: the color scheme
    built from `color.cycle` and `color.error`, and the language the
    syntax stands for. Missing color entries are taken from `base`.
    """
    if 'color.cycle' in config or 'color.error' in config:
        merged = ChainMap(config, base)
        config['color_scheme'] = ColorScheme(
            tuple(merged.get('color.cycle', DEFAULT_COLORS)),
            merged.get('color.error', DEFAULT_ERROR_COLOR)
        )
    if syntax is not None:
        config['language'] = Language.from_str(
            config.get('language', syntax)).value
    if 'extensions' in config:
        config['extensions'] = [
            ext if ext.startswith('.') else f'.{ext}'
            for ext in config['extensions']
        ]


class BracketColorizerManager:
    def __init__(self, settings: Optional[Mapping[str, Any]] = None):
        self.default_config: Dict[str, Any] = {}
        self.configs_by_stx: Dict[str, Dict[str, Any]] = {}
        self.syntaxes_by_ext: Dict[str, str] = {}
        self.is_ready = False
        self.load_config(settings or {})

    @classmethod
    def from_file(cls, path: Union[str, Path, None] = None):
        path = Path(path) if path else Path(__file__).with_name(SETTINGS_FILE)
        try:
            settings = json.loads(path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as e:
            raise SettingsError(f'cannot load settings {path}: {e}') from e
        return cls(settings)

    def load_config(self, settings: Mapping[str, Any]):
        if not isinstance(settings, Mapping):
            raise SettingsError('settings must be a JSON object')
        syntax_specific = settings.get('syntax_specific', {})
        if not isinstance(syntax_specific, Mapping) or not all(
                isinstance(c, Mapping) for c in syntax_specific.values()):
            raise SettingsError('syntax_specific must map names to objects')
        for syntax, config in syntax_specific.items():
            extensions = config.get('extensions', [])
            if not isinstance(extensions, (list, tuple)) or not all(
                    isinstance(ext, str) and ext for ext in extensions):
                raise SettingsError(
                    f'{syntax}: extensions must be a list of strings')
        self.is_ready = False

        default_config = dict(settings.get('default_config', {}))
        configs_by_stx = {
            syntax.lower(): dict(config)
            for syntax, config in syntax_specific.items()
        }
        syntaxes_by_ext = {}

        default_config.setdefault('enabled', True)
        default_config.setdefault('angle_generics', True)
        default_config.setdefault('color.cycle', list(DEFAULT_COLORS))
        default_config.setdefault('color.error', DEFAULT_ERROR_COLOR)

        compile_config(default_config, None, {})
        for syntax, config in configs_by_stx.items():
            compile_config(config, syntax, default_config)

        for syntax, config in configs_by_stx.items():
            for ext in config.get('extensions', []):
                syntaxes_by_ext[ext.lower()] = syntax

        Logger.debug = settings.get('debug', False)
        Logger.pprint({
            syntax: {k: v for k, v in config.items() if k != 'color_scheme'}
            for syntax, config in configs_by_stx.items()
        })

        self.syntaxes_by_ext = syntaxes_by_ext
        self.configs_by_stx = configs_by_stx
        self.default_config = default_config
        self.is_ready = True

    def get_syntax(
        self,
        syntax: Optional[str] = None,
        file_name: Optional[str] = None
    ) -> Optional[str]:
        if syntax and syntax.lower() in self.configs_by_stx:
            return syntax.lower()
        if file_name:
            ext = os.path.splitext(file_name)[1].lower()
            return self.syntaxes_by_ext.get(ext, None)
        return None

    def get_syntax_config(
        self,
        syntax: Optional[str] = None,
        file_name: Optional[str] = None
    ) -> Tuple[Optional[str], Config]:
        name = self.get_syntax(syntax, file_name)
        if name is not None:
            config = ChainMap(self.configs_by_stx[name], self.default_config)
        else:
            config = self.default_config
        return name, config

    def get_language(
        self,
        syntax: Optional[str] = None,
        file_name: Optional[str] = None
    ) -> Language:
        name, config = self.get_syntax_config(syntax, file_name)
        if name is not None:
            return Language(config['language'])
        return Language.from_str(syntax)

    def get_matcher(self, config: Config) -> BracketMatcher:
        if config['angle_generics']:
            policy = HeuristicAnglePolicy()
        else:
            policy = StrictAnglePolicy()
        return BracketMatcher(config['color_scheme'], policy)

    def analyze(
        self,
        content: str,
        syntax: Optional[str] = None,
        file_name: Optional[str] = None
    ) -> Optional[BracketCollection]:
        name, config = self.get_syntax_config(syntax, file_name)
        if not config['enabled']:
            Logger.print(f'Skipped disabled syntax {name}')
            return None
        language = self.get_language(syntax, file_name)
        return self.get_matcher(config).match_brackets(content, language)

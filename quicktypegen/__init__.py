import importlib

mod = "quicktypegen"
class LazyLoader:
    """
    Lazy loader for the quicktypegen functions to speed up startup time.
    """
    def __init__(self, mappings):
        self._modules = {}
        self._mappings = mappings

    def _load_module(self, module_name):
        if module_name not in self._modules:
            self._modules[module_name] = importlib.import_module(module_name)
        return self._modules[module_name]

    def __getattr__(self, item):
        if item in self._mappings:
            module_name, func_name = self._mappings[item]
            module = self._load_module(module_name)
            return getattr(module, func_name)
        else:
            return self._load_module(f"{mod}.{item}")

# Define the functions and their corresponding module paths
_mappings = {
    "generate": (f"{mod}.jsontots", "generate"),
    "convert_json_to_typescript": (f"{mod}.jsontots", "convert_json_to_typescript"),
    "convert_json_value_to_typescript": (f"{mod}.jsontots", "convert_json_value_to_typescript"),
    "convert_url_to_typescript": (f"{mod}.urltots", "convert_url_to_typescript"),
    "process_request": (f"{mod}.urltots", "process_request"),
    "infer_types": (f"{mod}.shape_inference", "infer_types"),
    "is_valid_json_data": (f"{mod}.common", "is_valid_json_data"),
    "suggest_root_name": (f"{mod}.common", "suggest_root_name"),
    "to_pascal_case": (f"{mod}.common", "to_pascal_case"),
    "fetch_json": (f"{mod}.httpclient", "fetch_json"),
    "save_type_file": (f"{mod}.filemanager", "save_type_file"),
    "validate_request": (f"{mod}.validate", "validate_request"),
}

_lazy_loader = LazyLoader(_mappings)

def __getattr__(name):
    return getattr(_lazy_loader, name)

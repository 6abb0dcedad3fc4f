import os
import utils
from pathlib import Path

p = Path(__file__).resolve()


class Configuration:
    # DIRECTORIES
    root_dir = p.parent
    config_dir = Path(root_dir, "config")
    templates_dir = Path(root_dir, "templates")
    formula_dir = Path(root_dir, "Formula")
    log_dir = Path(root_dir, "logs")

    # PROJECT SETUP
    utils.load_env_vars(Path(root_dir, ".env"))
    github_token = os.getenv("GITHUB_TOKEN", "").strip()
    debug = bool(os.getenv("DEBUG"))

    # GITHUB RELEASE PROPERTIES
    github_api_base_url = "https://api.github.com"
    user_agent = "Homebrew Formula Generator"
    request_timeout_seconds = 30
    max_redirects = 10

    # FORMULA PROPERTIES
    formula_name = "eep"
    version_pattern = r"^v\d+\.\d+\.\d+"

    # FILE NAMES
    metadata_file_name = "formula-metadata.json"
    resources_file_name = "resources.json"
    formula_template_name = "eep.rb.tmpl"
    formula_output_name = "eep.rb"
    log_file_name = "formula_gen.log"

    # FILE PATHS
    metadata_file = Path(root_dir, metadata_file_name)
    resources_file = Path(config_dir, resources_file_name)
    formula_template_file = Path(templates_dir, formula_template_name)
    formula_output_file = Path(formula_dir, formula_output_name)

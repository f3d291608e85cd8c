"""
Basic usage examples for runtime_template_switch.
"""
from runtime_template_switch import EngineConfig, TemplateRegistry, register_switch_helper

ACCESS_TEMPLATE = (
    '{{#switch user.role}}'
    '{{#case "admin" "owner"}}Welcome back, {{user.name}}. You have full access.{{/case}}'
    '{{#case "guest"}}Browsing as guest.{{/case}}'
    '{{#default}}Hello {{user.name}}.{{/default}}'
    '{{/switch}}'
)

def example_basic_usage():
    print("--- Basic Usage ---")
    registry = TemplateRegistry(EngineConfig())
    register_switch_helper(registry)
    registry.register_template_string("access", ACCESS_TEMPLATE)

    for role in ("owner", "guest", "editor"):
        context = {"user": {"name": "Alice", "role": role}}
        print(f"Role:   {role}")
        print(f"Result: {registry.render('access', context)}")

def example_nested():
    print("\n--- Nested ---")
    registry = TemplateRegistry(EngineConfig())
    register_switch_helper(registry)

    template = (
        '{{#switch state}}'
        '{{#case "page1" "page2"}}page 1 or 2{{#switch s}}{{#case 4}}s = 4{{/case}}{{/switch}}{{/case}}'
        '{{#default}}page0{{/default}}'
        '{{/switch}}'
    )
    print(f"Result: {registry.render_template(template, {'state': 'page2', 's': 4})}")

if __name__ == "__main__":
    example_basic_usage()
    example_nested()

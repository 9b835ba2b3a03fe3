"""
multi-build Task Collection
"""

from invoke import Collection

# Create namespace and collect tasks from each submodule
namespace = Collection()

from .build.tasks import config_show
from .build.tasks.clean import add_clean_task

for task_name, task in Collection.from_module(config_show).tasks.items():
    namespace.add_task(task)

add_clean_task(namespace)

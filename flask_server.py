""" 
Runs the task manager API:
"""

from task_manager import create_app

app = create_app()

if __name__ == '__main__':
    # Host, port and debug come from TASK_MANAGER_* settings
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])

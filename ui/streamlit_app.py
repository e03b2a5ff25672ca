from views.dashboard import render

render()

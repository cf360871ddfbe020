# habit_tracker/urls.py
# Brak widoków: warstwa prezentacji korzysta z GoalStore bezpośrednio
urlpatterns = []

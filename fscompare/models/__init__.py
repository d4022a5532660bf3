"""Classifier implementations for feature-set comparison."""

from fscompare.config import ClassifierConfig
from fscompare.models.classifier import Classifier, SklearnClassifier, build_model
from fscompare.models.logistic_regression import LogisticRegressionModel
from fscompare.models.svm import SVMModel
from fscompare.models.xgboost_model import XGBoostModel

__all__ = [
    "Classifier",
    "ClassifierConfig",
    "LogisticRegressionModel",
    "SklearnClassifier",
    "SVMModel",
    "XGBoostModel",
    "build_model",
]

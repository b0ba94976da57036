"""Closed set of Rx operators shown in the app.

The enum value is the display name, spelled the way RxSwift spells the method.
"""
from enum import Enum
class Operator(str,Enum):
    AMB="amb"
    BUFFER="buffer"
    CATCH_ERROR="catchError"
    CATCH_ERROR_JUST_RETURN="catchErrorJustReturn"
    COMBINE_LATEST="combineLatest"
    CONCAT="concat"
    DEBOUNCE="debounce"
    DELAY_SUBSCRIPTION="delaySubscription"
    DISTINCT_UNTIL_CHANGED="distinctUntilChanged"
    ELEMENT_AT="elementAt"
    EMPTY="empty"
    FILTER="filter"
    FLAT_MAP="flatMap"
    FLAT_MAP_FIRST="flatMapFirst"
    FLAT_MAP_LATEST="flatMapLatest"
    IGNORE_ELEMENTS="ignoreElements"
    INTERVAL="interval"
    JUST="just"
    MAP="map"
    MAP_WITH_INDEX="mapWithIndex"
    MERGE="merge"
    NEVER="never"
    OF="of"
    REDUCE="reduce"
    REPEAT_ELEMENT="repeatElement"
    RETRY="retry"
    SAMPLE="sample"
    SCAN="scan"
    SINGLE="single"
    SKIP="skip"
    SKIP_DURATION="skipDuration"
    SKIP_UNTIL="skipUntil"
    SKIP_WHILE="skipWhile"
    SKIP_WHILE_WITH_INDEX="skipWhileWithIndex"
    START_WITH="startWith"
    SWITCH_LATEST="switchLatest"
    TAKE="take"
    TAKE_DURATION="takeDuration"
    TAKE_LAST="takeLast"
    TAKE_UNTIL="takeUntil"
    TAKE_WHILE="takeWhile"
    TAKE_WHILE_WITH_INDEX="takeWhileWithIndex"
    THROTTLE="throttle"
    THROW="throw"
    TIMEOUT="timeout"
    TIMER="timer"
    TO_ARRAY="toArray"
    WITH_LATEST_FROM="withLatestFrom"
    ZIP="zip"
    @property
    def description(self):return self.value
    def __str__(self):return self.value
DEFAULT_OPERATOR=Operator.COMBINE_LATEST
__all__=["Operator","DEFAULT_OPERATOR"]
